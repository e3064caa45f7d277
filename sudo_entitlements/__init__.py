"""Python client SDK for the Sudo Platform entitlements service."""

__version__ = "1.0.0"

from .builder import create_entitlements_client
from .client import DefaultEntitlementsClient, EntitlementsClient
from .config import ClientConfig, load_config
from .error_classifier import classify_service_error, classify_thrown_error
from .errors import (
    AmbiguousEntitlementsError,
    AuthenticationError,
    EntitlementsError,
    EntitlementsSequenceNotFoundError,
    EntitlementsSetNotFoundError,
    FailedError,
    InsufficientEntitlementsError,
    InvalidArgumentError,
    InvalidTokenError,
    NoBillingGroupError,
    NoEntitlementsError,
    NoExternalIdError,
    NotSignedInError,
    ServiceError,
    UnknownError,
)
from .identity import NotAuthorizedError, SessionProvider, SudoPlatformError
from .logging_config import configure_logging
from .models import (
    Entitlement,
    EntitlementConsumer,
    EntitlementConsumption,
    EntitlementsConsumption,
    EntitlementsSet,
    UserEntitlements,
)
from .transport import (
    GraphQLError,
    GraphQLResponse,
    GraphQLTransport,
    HttpGraphQLTransport,
    TransportError,
)
from .versioning import split_version

__all__ = [
    "__version__",
    "create_entitlements_client",
    "EntitlementsClient",
    "DefaultEntitlementsClient",
    "ClientConfig",
    "load_config",
    "configure_logging",
    "classify_service_error",
    "classify_thrown_error",
    "split_version",
    "SessionProvider",
    "SudoPlatformError",
    "NotAuthorizedError",
    "Entitlement",
    "EntitlementConsumer",
    "EntitlementConsumption",
    "EntitlementsConsumption",
    "EntitlementsSet",
    "UserEntitlements",
    "GraphQLError",
    "GraphQLResponse",
    "GraphQLTransport",
    "HttpGraphQLTransport",
    "TransportError",
    "EntitlementsError",
    "AmbiguousEntitlementsError",
    "AuthenticationError",
    "FailedError",
    "InsufficientEntitlementsError",
    "InvalidArgumentError",
    "InvalidTokenError",
    "NoEntitlementsError",
    "NoExternalIdError",
    "NoBillingGroupError",
    "EntitlementsSequenceNotFoundError",
    "EntitlementsSetNotFoundError",
    "ServiceError",
    "NotSignedInError",
    "UnknownError",
]
