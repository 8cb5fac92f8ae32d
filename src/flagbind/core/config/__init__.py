from flagbind.core.config.binding_config import BindingConfig

__all__ = ["BindingConfig"]
