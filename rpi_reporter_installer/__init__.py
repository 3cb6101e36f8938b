"""RPi-Reporter-MQTT2HA-Daemon installer (Python-first, step-driven).

Core design goals:
- Idempotent, independently retriable steps
- Every host effect goes through a single gateway
- Failures are counted, never fatal to the run
- Centralized logging
"""

__all__ = []
