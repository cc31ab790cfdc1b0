import os

# ハンドラはモジュール読み込み時に台帳を生成するため、収集前にメモリ実装を指定する
os.environ.setdefault("LEDGER_BACKEND", "memory")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "courtside-test")
os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "WARNING")
