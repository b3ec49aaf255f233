from .app import create_app, create_app_from_env, error_payload

__all__ = ["create_app", "create_app_from_env", "error_payload"]
