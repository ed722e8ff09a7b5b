# Services package init
"""
Snippetbox Backend - Services Layer
===================================

What:  Request handling logic, independent of the HTTP framework.
How:   Each handler takes a SnippetRequest and returns a HandlerResult, or
       raises a SnippetboxError subclass for a not-found or bad-method outcome.

Service Inventory:
    - SnippetService: home page, snippet display, snippet creation
"""
