from .fs import PathResolverProtocol
from .guard import GuardSynthesizerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import SourceReaderProtocol

__all__ = [
    'PathResolverProtocol',
    'GuardSynthesizerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'SourceReaderProtocol',
]
