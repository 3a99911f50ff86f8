from .file_reader_service import FileReadingService
from .readers import DiskSourceReader, MappingSourceReader

__all__ = ["DiskSourceReader", "FileReadingService", "MappingSourceReader"]
