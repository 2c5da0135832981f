"""artserve — FastAPI HTTP layer.

Modules
-------
main
    FastAPI application with the two image routes and the ``main()`` CLI
    entry point.
"""
