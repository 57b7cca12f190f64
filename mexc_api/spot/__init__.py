"""Spot API, version 3: market data client, account helpers, enums and errors."""