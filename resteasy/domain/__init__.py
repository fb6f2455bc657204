"""Domain layer - framework-free types.

Structure:
- enums/: PermissionLevel, AccessRequirement, DataStatus, AuthorizationOutcome
- entities/: HandlerDefinition, OperationMetadata, RestInfo
- value_objects/: EndpointDescriptor, DataResult, RequestContext
- protocols/: AuthorizationProtocol, LoggerProtocol (ports)

The domain layer has NO dependencies on any framework or infrastructure.
"""
