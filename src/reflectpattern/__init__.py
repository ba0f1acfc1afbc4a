"""reflectpattern - reflection-driven construction with Strategy and DI"""

__version__ = "0.1.0"
