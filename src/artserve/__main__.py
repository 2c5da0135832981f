"""Allow ``python -m artserve`` to start the server."""

from artserve.api.main import main

main()
