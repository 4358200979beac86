# shared/config/__init__.py
