"""Futures API, version 1: request signing, response envelope and error codes."""