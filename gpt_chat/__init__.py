"""Ask OpenAI's GPT-3.5-turbo a question from the command line."""

__version__ = "0.1.0"
