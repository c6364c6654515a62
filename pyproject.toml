[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gptwire"
version = "0.1.0"
description = "Wire-format models and request helpers for the chat, assistant, batch and audio endpoints of OpenAI-style APIs"
requires-python = ">=3.10"
dependencies = []
keywords = ["openai", "chat", "completions", "assistants", "batch", "whisper", "json", "api"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gptwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
