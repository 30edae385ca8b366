"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Orchestration of process and refund workflows
- Ports: Abstract interfaces for the gateway, event sink and clock
- Services: Gateway dispatch and best-effort notification/analytics
- DTOs: Data transfer objects for use case input/output

The application layer depends on the domain layer and the shared logging
setup only. Infrastructure implementations are injected via ports.
"""
