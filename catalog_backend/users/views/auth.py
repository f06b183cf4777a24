import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from users.authentication import issue_token
from users.serializers import LoginSerializer, TokenResponseSerializer

logger = logging.getLogger(__name__)


class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={200: TokenResponseSerializer},
        description="Exchange administrator credentials for a 24h bearer token",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        username = serializer.validated_data["username"]
        user = authenticate(
            request=request,
            username=username,
            password=serializer.validated_data["password"],
        )

        # Unknown user and wrong password share one response
        if user is None:
            logger.warning("Failed login", extra={"username": username})
            return Response(
                {"error": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        logger.info("Administrator logged in", extra={"user_id": user.id})
        return Response({"token": issue_token(user)})
