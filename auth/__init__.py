"""Authentication modules."""

from auth.types import AuthenticateResult
from auth.config import AuthConfig
from auth.service import AuthService
