from pixpool.loader.service import Loader

__all__ = ["Loader"]
