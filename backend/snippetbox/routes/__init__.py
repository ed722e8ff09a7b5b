# Routes package init
"""
Snippetbox Backend - HTTP Routes Package
========================================

Route Inventory:
    - snippets.py: /{path} catch-all, dispatched through snippetbox.routing

Routes stay thin: they translate between HTTP and SnippetRequest /
HandlerResult values and leave every decision to the handlers.
"""
