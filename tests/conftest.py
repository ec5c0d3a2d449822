import os
import tempfile

# app.main builds its module-level app on import; keep its log files out of the repo
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="echo_backend_logs_"))
