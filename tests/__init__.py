import sys
import os


# We add the path above us to the PYTHONPATH to allow non-install testing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# We don't check if what we import is actually the one above us or one that
# was previously installed. So be cautious of old installs.
import lastfm

# The configuration file is in the tests directory instead of in ./res because
# it's easier to find for others this way.
TEST_CONFIG = os.path.join(os.path.dirname(__file__), 'test_config.yaml')
