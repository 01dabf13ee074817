#!/usr/bin/env python

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm.mixin"

import logging

from lastfm.decorators import authentication_required
from lastfm.error import InvalidParametersError

logger = logging.getLogger('lastfm.tag')

MAX_TAGS_PER_REQUEST = 10
"""last.fm accepts at most this many comma separated tags in one addTags call"""

def taggable(cls):
    prefix = cls.__name__.lower()

    def _to_tags(self, tags):
        from lastfm.tag import Tag
        result = []
        for tag in tags:
            if isinstance(tag, Tag):
                result.append(tag)
            elif isinstance(tag, str):
                result.append(Tag(self._api, tag))
            else:
                result.extend(_to_tags(self, tag))
        return result

    @authentication_required
    def add_tags(self, *tags):
        """
        Tag this item. Accepts L{Tag} objects, tag names or lists of them.

        @raise AuthenticationRequiredError: If the api is not authenticated.
        """
        names = [t.name for t in _to_tags(self, tags)]
        for i in range(0, len(names), MAX_TAGS_PER_REQUEST):
            params = self._default_params({
                'method': '%s.addTags' % prefix,
                'tags': ",".join(names[i:i + MAX_TAGS_PER_REQUEST])
                })
            self._api._post_data(params)
        if names:
            logger.debug("Added %d tag(s) to %r", len(names), self)

    @authentication_required
    def get_tags(self):
        """
        Tags applied to this item by the authenticated user.
        @rtype: L{list} of L{Tag}
        """
        from lastfm.tag import Tag
        params = self._default_params({'method': '%s.getTags' % prefix})
        data = self._api._fetch_data(params, sign = True, session = True)
        return [Tag(self._api, t.findtext('name')) for t in data.iter('tag')]

    def get_top_tags(self, limit = None):
        """
        Top tags for this item, most used first.

        @param limit: the maximum number of tags returned (optional)
        @type limit:  L{int}
        @rtype:       L{list} of L{Tag}

        @raise InvalidParametersError: If limit is negative.
        """
        from lastfm.tag import Tag
        if limit is not None and limit < 0:
            raise InvalidParametersError("limit must not be negative")
        params = self._default_params({'method': '%s.getTopTags' % prefix})
        data = self._api._fetch_data(params)
        tags = [Tag(self._api, t.findtext('name')) for t in data.iter('tag')]
        if limit is not None:
            tags = tags[:limit]
        return tags

    @authentication_required
    def remove_tags(self, *tags):
        """
        Remove tags from this item, one request per tag.

        @raise AuthenticationRequiredError: If the api is not authenticated.
        """
        for tag in _to_tags(self, tags):
            params = self._default_params({
                'method': '%s.removeTag' % prefix,
                'tag': tag.name
                })
            self._api._post_data(params)
            logger.debug("Removed tag '%s' from %r", tag.name, self)

    def set_tags(self, tags):
        """
        Make the tags of this item be exactly the given tags, adding the
        missing ones and then removing the others. Tag names are compared
        ignoring case, like last.fm does, so changing only the case of a
        tag sends no request. Repeated names are sent once.

        @param tags: a L{Tag}, a tag name, or a list of them
        @type tags:  L{list}
        """
        from lastfm.tag import Tag
        if isinstance(tags, (str, Tag)):
            tags = [tags]
        new_set = []
        for tag in _to_tags(self, tags):
            if tag not in new_set:
                new_set.append(tag)
        current = self.get_tags()
        to_add = [t for t in new_set if t not in current]
        to_remove = [t for t in current if t not in new_set]

        if to_add:
            self.add_tags(to_add)
        if to_remove:
            self.remove_tags(to_remove)

    def clear_tags(self):
        """Remove every tag the authenticated user applied to this item."""
        current = self.get_tags()
        if current:
            self.remove_tags(current)

    cls.add_tags = add_tags
    cls.get_tags = get_tags
    cls.get_top_tags = get_top_tags
    cls.remove_tags = remove_tags
    cls.set_tags = set_tags
    cls.clear_tags = clear_tags

    @property
    def top_tags(self):
        """top tags for the item"""
        return self.get_top_tags()

    if not hasattr(cls, 'top_tags'):
        cls.top_tags = top_tags

    return cls
