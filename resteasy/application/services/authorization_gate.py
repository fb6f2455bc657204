"""Authorization gate - transport check plus delegated permission decision.

Every permission-gated operation passes through this gate before any data
is touched:

1. Only the secure scheme is accepted. A request on any other scheme is
   Forbidden without consulting the authorization collaborator. A client key
   of the expected length seen over plain HTTP is reported (prefix only).
2. On the secure scheme, the credential and the required permission list
   are handed to the AuthorizationProtocol adapter.
3. An exception from the adapter is an internal failure, not a denial.

Usage:
    gate = AuthorizationGate(authorization=adapter, logger=logger)
    required = derive_required_permissions(operation.access_requirements)
    outcome = await gate.check(context.scheme, context.credential, required)
"""

from collections.abc import Iterable, Sequence

from resteasy.domain.enums.authorization_outcome import AuthorizationOutcome
from resteasy.domain.enums.permission_level import AccessRequirement, PermissionLevel
from resteasy.domain.protocols.authorization_protocol import AuthorizationProtocol
from resteasy.domain.protocols.logger_protocol import LoggerProtocol


def derive_required_permissions(
    requirements: Iterable[AccessRequirement],
) -> list[PermissionLevel]:
    """Map declared access markers to the required permission list.

    One entry per marker, in declaration order; duplicates are kept.

    Args:
        requirements: Markers declared on the operation.

    Returns:
        list[PermissionLevel]: Levels to pass to the authorization collaborator.

    Example:
        >>> derive_required_permissions(
        ...     [AccessRequirement.READ, AccessRequirement.READ]
        ... )
        [<PermissionLevel.READ: 1>, <PermissionLevel.READ: 1>]
    """
    return [requirement.permission_level for requirement in requirements]


class AuthorizationGate:
    """Secure-transport precondition and authorization delegation.

    Dependencies (injected via constructor):
        - AuthorizationProtocol: Makes the allow/deny decision
        - LoggerProtocol: Warnings and errors
    """

    def __init__(
        self,
        authorization: AuthorizationProtocol,
        logger: LoggerProtocol,
        *,
        secure_scheme: str = "https",
        insecure_scheme: str = "http",
        credential_length: int = 32,
        credential_log_prefix_length: int = 10,
    ) -> None:
        """Initialize gate with dependencies.

        Args:
            authorization: Authorization collaborator.
            logger: Structured logger.
            secure_scheme: Scheme on which authorization is attempted.
            insecure_scheme: Scheme on which leaked client keys are reported.
            credential_length: Length of a well-formed client key.
            credential_log_prefix_length: Key characters allowed in logs.
        """
        self._authorization = authorization
        self._logger = logger
        self._secure_scheme = secure_scheme.lower()
        self._insecure_scheme = insecure_scheme.lower()
        self._credential_length = credential_length
        self._prefix_length = credential_log_prefix_length

    async def check(
        self,
        scheme: str,
        credential: str | None,
        required_permissions: Sequence[PermissionLevel],
    ) -> AuthorizationOutcome:
        """Decide whether the request may proceed.

        Args:
            scheme: URL scheme of the request.
            credential: Client key, None or empty when absent.
            required_permissions: Levels required by the operation.

        Returns:
            AuthorizationOutcome.ALLOW: Collaborator allowed the request.
            AuthorizationOutcome.DENY_FORBIDDEN: Not on the secure scheme.
            AuthorizationOutcome.DENY_UNAUTHORIZED: Collaborator denied it.
            AuthorizationOutcome.INTERNAL_FAILURE: Collaborator raised.
        """
        scheme = scheme.lower()

        if scheme != self._secure_scheme:
            if (
                scheme == self._insecure_scheme
                and credential
                and self._is_client_key(credential)
            ):
                self._logger.warning(
                    "insecure_credential_transmission",
                    credential_prefix=f"{credential[: self._prefix_length]}...",
                    scheme=scheme,
                )
            return AuthorizationOutcome.DENY_FORBIDDEN

        try:
            allowed = await self._authorization.authorize(
                credential, list(required_permissions)
            )
        except Exception as e:
            self._logger.error(
                "authorization_check_error",
                error=e,
                required_permissions=[level.name for level in required_permissions],
            )
            return AuthorizationOutcome.INTERNAL_FAILURE

        if allowed:
            return AuthorizationOutcome.ALLOW
        return AuthorizationOutcome.DENY_UNAUTHORIZED

    def _is_client_key(self, credential: str) -> bool:
        return bool(credential.strip()) and len(credential) == self._credential_length
