"""
Snippetbox Backend - Application Package
========================================

What: A minimal snippet-sharing web server with three routes.
Who:  Imported by uvicorn (``snippetbox.main:app``), the ``snippetbox`` console
      script, and the test suite.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Routes + Middleware (HTTP)      │  ← request/response translation
    ├─────────────────────────────────────┤
    │       Routing (route table)         │  ← path → handler selection
    ├─────────────────────────────────────┤
    │     Services (snippet handlers)     │  ← pure request → result logic
    ├─────────────────────────────────────┤
    │         Schemas (values)            │  ← SnippetRequest, HandlerResult
    └─────────────────────────────────────┘

    There is no persistence layer; every request is handled from its own data.
"""

__version__ = "1.0.0"
