# shared/decorators/__init__.py
