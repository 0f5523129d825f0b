"""Environment based credentials for the auth0kit command line tools."""

from typing import TYPE_CHECKING, Any

import requests
from dotenv import load_dotenv

from ..utils.logging_utils import get_logger
from .config import AUTH0_TOKEN_TIMEOUT, ClientOptions, get_env_config
from .exceptions import Auth0KitError, AuthConfigError

if TYPE_CHECKING:
    from ..management.client import ManagementApiClient
    from ..models.authentication import AccessTokenResponse

# Module logger
logger = get_logger(__name__)


def request_management_token(env: str = "dev") -> "AccessTokenResponse":
    """Request a Management API token using the client credentials of ``env``.

    Args:
        env: Environment to use ('dev' or 'prod')

    Returns:
        AccessTokenResponse: Token response including ``expires_in``

    Raises:
        AuthConfigError: If required environment variables are missing or
            Auth0 refuses the credentials
    """
    # Imported here to keep core free of the API client packages at import time
    from ..authentication.client import AuthenticationApiClient
    from ..models.authentication import ClientCredentialsTokenRequest

    load_dotenv(override=True)
    config = get_env_config(env)

    client = AuthenticationApiClient(
        config["domain"],
        client_id=config["client_id"],
        client_secret=config["client_secret"],
        options=ClientOptions(timeout=AUTH0_TOKEN_TIMEOUT),
    )

    try:
        response = client.get_token(
            ClientCredentialsTokenRequest(audience=config["audience"])
        )
    except (Auth0KitError, requests.RequestException) as e:
        raise AuthConfigError(
            "Failed to obtain Auth0 management token", details=str(e)
        ) from e

    if not response.access_token:
        raise AuthConfigError("Access token not found in Auth0 response")

    return response


def get_access_token(env: str = "dev") -> str:
    """Get a Management API token for ``env``.

    Raises:
        AuthConfigError: If the token could not be obtained
    """
    return request_management_token(env).access_token or ""


def get_management_client(
    env: str = "dev", options: ClientOptions | None = None
) -> "ManagementApiClient":
    """Create a ManagementApiClient for ``env`` with a fresh token."""
    from ..management.client import ManagementApiClient

    token = get_access_token(env)
    config = get_env_config(env)
    return ManagementApiClient(
        token, config["domain"], options=options or ClientOptions.from_env()
    )


def _probe_management_api(token: str, domain: str) -> tuple[str | None, str]:
    """Fetch a single user.

    Returns the failure reason (None on success) and the rate limit status
    reported by the response.
    """
    from ..management.client import ManagementApiClient
    from ..models.paging import PaginationInfo

    client = ManagementApiClient(token, domain)
    failure = None
    try:
        client.users.get_all(pagination=PaginationInfo(per_page=1, include_totals=False))
    except (Auth0KitError, requests.RequestException) as e:
        failure = str(e)
    summary = client.rest.rate_limiter.get_status_summary(client.get_last_api_info())
    return failure, summary


def doctor(env: str = "dev", test_api: bool = False) -> dict[str, Any]:
    """Check that the credentials of ``env`` can obtain a token.

    With ``test_api`` the token is also used for a one-user listing, which
    shows whether the client grant includes ``read:users``.

    Returns:
        dict: ``success``, ``environment``, ``token_obtained``, ``api_tested``
        and ``details``; ``api_status`` and ``rate_limit`` after an API test,
        ``error`` when no token could be obtained.
    """
    status: dict[str, Any] = {
        "success": False,
        "environment": env,
        "token_obtained": False,
        "api_tested": False,
    }
    logger.info(
        f"🩺 Checking {env.upper()} credentials",
        extra={"operation": "doctor_check", "environment": env},
    )

    try:
        config = get_env_config(env)
        logger.info(
            f"  domain={config['domain']} client_id={config['client_id'][:8]}... "
            f"audience={config['audience']}"
        )
        token = get_access_token(env)
    except AuthConfigError as e:
        logger.error(
            f"❌ Credentials check failed: {e}",
            extra={"operation": "doctor_check", "error_code": "config"},
        )
        status["error"] = str(e)
        status["details"] = "Authentication configuration is invalid"
        return status

    logger.info("  🔑 Token issued", extra={"operation": "token_request"})
    status["success"] = True
    status["token_obtained"] = True
    status["details"] = "Credentials are working correctly"

    if not test_api:
        return status

    failure, rate_limit_status = _probe_management_api(token, config["domain"])
    status["api_tested"] = True
    status["rate_limit"] = rate_limit_status
    logger.info(f"  ⏱️  {rate_limit_status}", extra={"operation": "api_test"})
    if failure is None:
        logger.info("  🌐 Management API reachable", extra={"operation": "api_test"})
        status["api_status"] = "success"
        status["details"] = "Credentials and API access are working correctly"
    else:
        logger.warning(
            f"  ⚠️  Management API call failed: {failure}",
            extra={"operation": "api_test"},
        )
        status["api_status"] = "failed"
        status["details"] = f"Token obtained but API access failed: {failure}"
    return status
