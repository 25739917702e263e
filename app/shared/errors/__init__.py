"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that validation failures,
business errors and unexpected errors are consistently translated
into HttpResponse envelopes.
"""
