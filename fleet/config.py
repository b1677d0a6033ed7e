"""Environment-driven settings for the fleet models and tooling."""

import os

LOG_LEVEL = os.environ.get("FLEET_LOG_LEVEL", "WARNING")

# Claims issued by User.claims()
TOKEN_ISSUER = os.environ.get("FLEET_TOKEN_ISSUER", "auth-service")
TOKEN_TTL_HOURS = int(os.environ.get("FLEET_TOKEN_TTL_HOURS", "24"))
