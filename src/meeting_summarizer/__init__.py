"""AI meeting notes summarizer backend."""
