import os
import tempfile

# Must be set before db.py is imported anywhere
_TMP_DIR = tempfile.mkdtemp(prefix="grading-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "grading.db")

from db import Base, engine  # noqa: E402
import models  # noqa: E402,F401

Base.metadata.create_all(engine)
