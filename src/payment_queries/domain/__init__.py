"""Domain layer - Entities, value objects and rules.

This layer contains:
- Entities: Payment, PaymentItem, User
- Value Objects: Immutable objects defined by their attributes (PaymentId, YearMonth)
- Domain Exceptions: Argument and invariant violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
