"""Collection writers and the exporter front end."""

from .base import BaseWriter
from .delimited_writer import DelimitedWriter
from .exporter import Exporter
from .feed import FeedTemplate, generate_feed_data_file
from .xml_writer import XMLWriter, beautify_xml

__all__ = [
    "BaseWriter",
    "DelimitedWriter",
    "XMLWriter",
    "beautify_xml",
    "Exporter",
    "FeedTemplate",
    "generate_feed_data_file",
]
