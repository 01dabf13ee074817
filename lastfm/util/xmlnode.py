#!/usr/bin/env python
"""Helpers for pulling text out of the XML nodes returned by last.fm"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.util"

def _descendants(node, name):
    for n in node.iter(name):
        if n is not node:
            yield n

def extract(node, name, index = 0):
    """
    Get the stripped text of the index-th descendant of node called name,
    counting in document order.

    @param node:  the node to search under
    @type node:   C{xml.etree.ElementTree.Element}
    @param name:  the tag name of the wanted descendant
    @type name:   L{str}
    @param index: which of the matching descendants to use (optional)
    @type index:  L{int}

    @return:      the text, or None if there is no such node. Nodes without
                  text give an empty string.
    @rtype:       L{str}
    """
    for i, n in enumerate(_descendants(node, name)):
        if i == index:
            return (n.text or '').strip()
    return None

def extract_all(node, name, limit = None):
    """Get the stripped text of every descendant of node called name."""
    texts = []
    for n in _descendants(node, name):
        if limit is not None and len(texts) >= limit:
            break
        texts.append((n.text or '').strip())
    return texts

def extract_int(node, name, index = 0):
    text = extract(node, name, index)
    if not text:
        return None
    return int(text)

def find_all(node, name):
    """Every descendant node called name, like a DOM getElementsByTagName."""
    return list(_descendants(node, name))

def image_urls(node):
    """Map of image size to image url for the direct image children of node."""
    return dict([(i.get('size'), (i.text or '').strip()) for i in node.findall('image')])

IMAGE_SIZES = ['small', 'medium', 'large', 'extralarge', 'mega']
"""Image sizes served by last.fm, smallest first"""

def pick_image(images, size = None):
    """
    Pick an image url out of a size to url map, as built by L{image_urls}.
    The largest available image is used when no size is given.
    """
    if size is not None:
        return images.get(size) or None
    for s in reversed(IMAGE_SIZES):
        if images.get(s):
            return images[s]
    return None
