"""Test suite for the App Connections service.

- unit/: Unit tests - domain, application and infrastructure in isolation,
  plus HTTP routes against an in-process FastAPI app

Unit tests need no database: persistence is mocked or held in memory, while
Casbin and the AES-GCM cipher run for real.
"""
