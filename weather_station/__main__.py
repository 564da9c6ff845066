"""Allow ``python -m weather_station``."""

from .cli import main

raise SystemExit(main())
