from .FuseMethod import FuseMethod
