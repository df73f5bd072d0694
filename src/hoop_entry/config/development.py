import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON file standing in for browser local storage
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/local_storage.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "hoopentryData")

DEBUG = True
