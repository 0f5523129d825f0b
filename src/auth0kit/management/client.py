"""Client for the Auth0 Management API v2.

Full documentation for the Management API is available at
https://auth0.com/docs/api/management/v2
"""

from ..core.config import ClientOptions, normalize_domain
from ..core.exceptions import AuthConfigError
from ..core.http_client import RestClient
from ..core.rate_limiter import RateLimit
from ..models.authentication import ClientCredentialsTokenRequest
from ..utils.logging_utils import get_logger
from .clients import Clients
from .connections import Connections
from .device_credentials import DeviceCredentials
from .grants import ClientGrants, Grants
from .jobs import Jobs
from .logs import Logs
from .resource_servers import ResourceServers
from .roles import Roles
from .rules import Rules
from .stats import Blacklists, Stats, TenantSettingsResource
from .tickets import Tickets
from .users import Users

# Module logger
logger = get_logger(__name__)


class ManagementApiClient:
    """Typed access to the Management API of one tenant.

    All resource groups share a single :class:`RestClient`, so the rate
    limit state and ``get_last_api_info()`` reflect every call made through
    this client.
    """

    def __init__(
        self, token: str, domain: str, options: ClientOptions | None = None
    ) -> None:
        if not token:
            raise AuthConfigError("A Management API token is required")

        self.domain = domain
        self.base_url = f"{normalize_domain(domain)}/api/v2"
        self.rest = RestClient(self.base_url, token=token, options=options)

        self.users = Users(self.rest)
        self.clients = Clients(self.rest)
        self.connections = Connections(self.rest)
        self.device_credentials = DeviceCredentials(self.rest)
        self.grants = Grants(self.rest)
        self.client_grants = ClientGrants(self.rest)
        self.roles = Roles(self.rest)
        self.resource_servers = ResourceServers(self.rest)
        self.rules = Rules(self.rest)
        self.logs = Logs(self.rest)
        self.tickets = Tickets(self.rest)
        self.jobs = Jobs(self.rest)
        self.stats = Stats(self.rest)
        self.tenant_settings = TenantSettingsResource(self.rest)
        self.blacklists = Blacklists(self.rest)

    def update_token(self, token: str) -> None:
        """Swap the bearer token, e.g. after it expired."""
        if not token:
            raise AuthConfigError("A Management API token is required")
        self.rest.token = token

    def get_last_api_info(self) -> RateLimit | None:
        """Rate limit headers of the most recent response."""
        return self.rest.get_last_api_info()

    @classmethod
    def from_client_credentials(
        cls,
        domain: str,
        client_id: str,
        client_secret: str,
        options: ClientOptions | None = None,
    ) -> "ManagementApiClient":
        """Build a client from a machine to machine application.

        Requests a token for the tenant's Management API audience using the
        Client Credentials grant.
        """
        # Imported here; the authentication package is otherwise independent
        from ..authentication.client import AuthenticationApiClient

        auth = AuthenticationApiClient(
            domain, client_id=client_id, client_secret=client_secret, options=options
        )
        audience = f"{auth.base_uri}/api/v2/"
        response = auth.get_token(ClientCredentialsTokenRequest(audience=audience))
        if not response.access_token:
            raise AuthConfigError(
                "Access token not found in Auth0 response",
                details=f"audience={audience}",
            )

        logger.info(
            f"Obtained Management API token for {domain}",
            extra={"operation": "client_credentials"},
        )
        return cls(response.access_token, domain, options=options)
