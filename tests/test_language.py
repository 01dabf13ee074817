import unittest

from lastfm.language import SiteLanguage, get_site_domain


class TestSiteLanguage(unittest.TestCase):
    def test_members(self):
        self.assertEqual(len(SiteLanguage), 12)

    def test_domains(self):
        self.assertEqual(SiteLanguage.ENGLISH.domain, 'www.last.fm')
        self.assertEqual(SiteLanguage.PORTUGUESE.domain, 'www.lastfm.com.br')
        self.assertEqual(SiteLanguage.CHINESE.domain, 'cn.last.fm')
        self.assertEqual(len(set(l.domain for l in SiteLanguage)), 12)

    def test_texts(self):
        self.assertEqual(str(SiteLanguage.GERMAN), 'Deutsch')
        self.assertEqual(SiteLanguage.JAPANESE.texts, ('Nihongo', '日本語'))
        self.assertEqual(str(SiteLanguage.CHINESE), 'Zhōngwén')
        for language in SiteLanguage:
            self.assertTrue(language.texts)

    def test_site_domain(self):
        self.assertEqual(get_site_domain(), 'www.last.fm')
        self.assertEqual(get_site_domain(SiteLanguage.TURKISH), 'www.lastfm.com.tr')
        self.assertEqual(get_site_domain('www.lastfm.se'), 'www.lastfm.se')
        self.assertRaises(ValueError, get_site_domain, 'www.example.com')


if __name__ == '__main__':
    unittest.main()
