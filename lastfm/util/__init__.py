__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.util"

from lastfm.util.xmlnode import extract, extract_all, extract_int, find_all, image_urls, pick_image
from lastfm.util.conversions import timestamp_to_datetime, datetime_to_timestamp, url_safe

__all__ = ['extract', 'extract_all', 'extract_int', 'find_all', 'image_urls', 'pick_image',
           'timestamp_to_datetime', 'datetime_to_timestamp', 'url_safe']
