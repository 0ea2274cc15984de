"""Application layer - Use cases, request builders and port definitions.

This layer contains:
- Use Cases: The charge and cancel workflows
- Builders: Mapping from domain objects to processor request fragments
- Ports: Abstract interfaces for the processor and the client IP lookup
- DTOs: Requests sent through the gateway port and its responses
- Config: Locale and connection options injected by the caller

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
