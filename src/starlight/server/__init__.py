"""Request pipeline and the uvicorn launcher."""
