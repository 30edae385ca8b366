"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Immutable records produced by the orchestrator (Transaction, Refund)
- Value Objects: Immutable objects defined by their attributes (PaymentMethod, Currency)
- Domain Services: Stateless rules (validation, fraud tiers, discounts, conversion, routing)
- Domain Events: Facts emitted for observability (risk, confirmation, analytics)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
