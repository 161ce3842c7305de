from .Upath import UniversalPath
from .fs.Tree import Tree
from .fs.Directory import Directory
from .fs.File import File
from .fs.common.Content import ContentArena
from .provider.ContentProvider import ContentProvider, NullProvider
from .provider.WebSearch import WebSearchProvider
from .provider.Hook import ProvisioningHook
from .SpiderFS import SpiderFS
