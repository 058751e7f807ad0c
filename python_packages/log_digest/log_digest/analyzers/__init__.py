# log_digest/log_digest/analyzers/__init__.py
