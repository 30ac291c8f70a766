"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses (write intent)
- services/: AppConnectionService and the response sanitizer
- errors/: Application errors handed to the presentation layer

The application layer orchestrates domain logic and ports; it contains no
persistence or transport code.
"""
