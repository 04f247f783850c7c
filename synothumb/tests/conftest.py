"""
Pytest fixtures for synothumb tests.
"""

import os

import pytest


@pytest.fixture
def make_jpeg():
    """Fixture providing a factory that writes a solid-color JPEG."""
    from PIL import Image

    def _make(path, size=(400, 300), color='red'):
        os.makedirs(os.path.dirname(str(path)), exist_ok=True)
        Image.new('RGB', size, color=color).save(str(path), format='JPEG')
        return str(path)

    return _make


@pytest.fixture
def photo_tree(tmp_path, make_jpeg):
    """
    Fixture providing a photo library:

        photo.jpg            4000x3000 landscape
        notes.txt            not a photo
        sub/pic.jpeg         600x900 portrait
        sub/@eaDir/old.jpg   inside a metadata directory
    """
    make_jpeg(tmp_path / 'photo.jpg', size=(4000, 3000))
    (tmp_path / 'notes.txt').write_text('not a photo')
    make_jpeg(tmp_path / 'sub' / 'pic.jpeg', size=(600, 900), color='blue')
    make_jpeg(tmp_path / 'sub' / '@eaDir' / 'old.jpg', size=(100, 100))
    return tmp_path


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')
