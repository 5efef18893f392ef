"""Application constants."""

# Body returned by GET {CONTEXT_PATH}/ (exact, no trailing newline)
GREETING: str = "Hello, World from Spring Boot!"

# Logged once per greeting request
GREETING_LOG_MESSAGE: str = "Received request for / endpoint"
