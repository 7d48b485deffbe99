[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mqttcore"
version = "0.1.0"
description = "Building blocks for MQTT v5 clients: packet models, topic routing, packet identifiers, acknowledgement ordering, keepalive pings, topic aliases and request/response"
requires-python = ">=3.10"
dependencies = []
keywords = ["mqtt", "mqtt5", "iot", "messaging", "pubsub", "router"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mqttcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
