"""Application metadata."""

APP_NAME = "codebuddy"
APP_VERSION = "0.4.20"