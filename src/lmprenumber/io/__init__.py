from .data_reader import DataFileReader
from .data_writer import DataFileWriter
from .section_parser import SectionParser, read_header

__all__ = [
    'DataFileReader',
    'DataFileWriter',
    'SectionParser',
    'read_header'
]
