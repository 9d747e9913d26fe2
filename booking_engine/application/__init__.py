"""
Application layer of the booking engine.

Use cases orchestrate the domain and talk to infrastructure only through
the ports in ``interfaces``.

Structure:
- use_cases/: one class per operation
- dtos/: structured results
- interfaces/: ports (repositories, collaborators, clock, transactions)
- messages.py: user-facing texts and notification bodies
"""
