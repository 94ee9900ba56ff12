# tests/conftest.py
import os

# keep password hashing fast; must run before minishop.config is imported
os.environ.setdefault("MINISHOP_HASH_ITERATIONS", "1000")
