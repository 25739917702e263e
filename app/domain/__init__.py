"""
Domain layer package.

Contains the error types request-handling code raises to signal
domain-rule violations. This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
