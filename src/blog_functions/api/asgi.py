"""ASGI entrypoint for the blog functions API."""

from blog_functions.api.app import create_app
from blog_functions.containers import build_container

app = create_app(build_container())
