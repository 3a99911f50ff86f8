import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import incflat.core.interfaces as I

    assert hasattr(I, "GuardSynthesizerProtocol")
    assert hasattr(I, "PathResolverProtocol")
    assert hasattr(I, "SourceReaderProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_default_implementations_satisfy_protocols():
    import incflat
    import incflat.core.interfaces as I

    assert isinstance(incflat.IncludePathResolver(), I.PathResolverProtocol)
    assert isinstance(incflat.GuardSynthesizer(), I.GuardSynthesizerProtocol)
    assert isinstance(incflat.MappingSourceReader({}), I.SourceReaderProtocol)
    assert isinstance(incflat.DiskSourceReader(), I.SourceReaderProtocol)
