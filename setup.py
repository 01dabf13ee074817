from setuptools import setup

setup(
      name="python-lastfm",
      version="0.3",
      author='Abhinav Sarkar',
      author_email='abhinav@abhinavsarkar.net',
      description=("A python interface to the last.fm web services API: "
                     "tags, albums, artists, tracks, users, searches "
                     "and weekly charts."),
      license='LGPL',
      python_requires=">=3.6",
      install_requires=[
                  "requests >= 2.0",
                  "PyYAML >= 3.05",
                  "decorator >= 4.0",
      ],
      extras_require={
          "test": [
              "pytest",
          ],
      },
      keywords="last.fm lastfm audioscrobbler webservice api",
      packages=['lastfm', 'lastfm.mixin', 'lastfm.util'],
      )
