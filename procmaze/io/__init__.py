from .obj import write_mtl, write_obj

__all__ = ["write_obj", "write_mtl"]
