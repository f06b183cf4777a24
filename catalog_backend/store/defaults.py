# store/defaults.py

"""
Default storefront appearance, written once into an empty settings table.
"""

DEFAULT_STORE_NAME = "MIZUBELEM - Filial Portel"
DEFAULT_PRIMARY_COLOR = "#0ea5e9"

DEFAULT_SETTINGS = {
    "storeName": DEFAULT_STORE_NAME,
    "primaryColor": DEFAULT_PRIMARY_COLOR,
    "layoutMode": "grid",
    "fontFamily": "Inter",
}
