import os
import tempfile

SECRET_KEY = "test-secret"

STORAGE_PATH = os.getenv("STORAGE_PATH", os.path.join(tempfile.gettempdir(), "hoop_entry_test_storage.json"))
STORAGE_KEY = "hoopentryData"

DEBUG = False
TESTING = True
