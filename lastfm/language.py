#!/usr/bin/env python
"""Languages of the last.fm website and the domains they are served on"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

from enum import Enum

class SiteLanguage(Enum):
    """
    Languages available for the last.fm website. The value of each member
    is the domain the site is served on in that language.
    """
    ENGLISH = 'www.last.fm'
    GERMAN = 'www.lastfm.de'
    SPANISH = 'www.lastfm.es'
    FRENCH = 'www.lastfm.fr'
    ITALIAN = 'www.lastfm.it'
    POLISH = 'www.lastfm.pl'
    PORTUGUESE = 'www.lastfm.com.br'
    SWEDISH = 'www.lastfm.se'
    TURKISH = 'www.lastfm.com.tr'
    RUSSIAN = 'www.lastfm.ru'
    JAPANESE = 'www.lastfm.jp'
    CHINESE = 'cn.last.fm'

    @property
    def domain(self):
        """
        host name of the last.fm website in this language
        @rtype: L{str}
        """
        return self.value

    @property
    def texts(self):
        """
        names of the language, as written in the language itself
        @rtype: L{tuple} of L{str}
        """
        return LANGUAGE_TEXTS[self]

    def __str__(self):
        return self.texts[0]

LANGUAGE_TEXTS = {
    SiteLanguage.ENGLISH: ("English",),
    SiteLanguage.GERMAN: ("Deutsch",),
    SiteLanguage.SPANISH: ("Español",),
    SiteLanguage.FRENCH: ("Français",),
    SiteLanguage.ITALIAN: ("Italiano",),
    SiteLanguage.POLISH: ("Polszczyzna",),
    SiteLanguage.PORTUGUESE: ("Português",),
    SiteLanguage.SWEDISH: ("Svenska",),
    SiteLanguage.TURKISH: ("Türkçe",),
    SiteLanguage.RUSSIAN: ("русский язык",),
    SiteLanguage.JAPANESE: ("Nihongo", "日本語"),
    SiteLanguage.CHINESE: ("Zhōngwén", "中文"),
}
"""Map of site languages to their names"""

def get_site_domain(language = None):
    """
    Get the website domain for a language, English when none is given.

    @param language: the site language (optional)
    @type language:  L{SiteLanguage}
    @rtype:          L{str}
    """
    if language is None:
        language = SiteLanguage.ENGLISH
    return SiteLanguage(language).domain
