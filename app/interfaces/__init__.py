"""
Interfaces layer package.

Contains FastAPI routers and the Pydantic response envelope.
No business logic belongs here.
"""
