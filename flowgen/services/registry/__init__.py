from .config import ScanConfig
from .generator import RegistryGenerator
from .resolver import PathResolver
from .service import DeclarationScanner

__all__ = ["DeclarationScanner", "PathResolver", "RegistryGenerator", "ScanConfig"]
