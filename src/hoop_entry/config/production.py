import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_PATH = os.getenv("STORAGE_PATH", "/var/lib/hoop-entry/local_storage.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "hoopentryData")

DEBUG = False
