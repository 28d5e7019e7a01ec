__title__ = "curlite"
__description__ = "A minimal command line HTTP client."
__version__ = "0.1.0"
