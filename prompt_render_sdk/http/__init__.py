"""HTTP API layer for the Prompt Render SDK.

FastAPI router and app factory exposing provider discovery, rendering and
payload validation. Mount ``router`` into a host application or serve
``create_app()`` directly.
"""
