"""netbindgen: generate shared network provider bindings from a manifest."""

__version__ = "0.1.0"
