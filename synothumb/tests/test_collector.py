"""Tests for Collector class."""

import os

import pytest
from synothumb.collector import CollectionError, Collector


def relative(paths, root):
    return {os.path.relpath(p, str(root)) for p in paths}


class TestCollector:
    """Tests for Collector class."""
    
    def test_collects_photos_and_prunes(self, photo_tree, logger):
        """Test the sample library collects photo.jpg and sub/pic.jpeg only."""
        files = Collector(logger=logger).collect(str(photo_tree))
        
        assert relative(files, photo_tree) == {
            'photo.jpg',
            os.path.join('sub', 'pic.jpeg'),
        }
    
    def test_extension_filter(self, tmp_path):
        """Test only .jpg/.jpeg in any case are collected."""
        for name in ['a.JPG', 'b.jpeg', 'c.png', 'd', 'e.Jpeg']:
            (tmp_path / name).write_bytes(b'')
        
        files = Collector().collect(str(tmp_path))
        
        assert relative(files, tmp_path) == {'a.JPG', 'b.jpeg', 'e.Jpeg'}
    
    def test_metadata_directory_pruned_at_any_depth(self, tmp_path):
        """Test @eaDir is never descended into."""
        for rel in ['@eaDir/a.jpg', 'x/@eaDir/b.jpg', 'x/@eaDir/y/c.jpg', 'x/d.jpg']:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b'')
        
        files = Collector().collect(str(tmp_path))
        
        assert relative(files, tmp_path) == {os.path.join('x', 'd.jpg')}
    
    def test_deep_tree(self, tmp_path):
        """Test files from every level are merged."""
        expected = set()
        for depth in range(6):
            rel = os.path.join(*(['d'] * depth), f'img{depth}.jpg') if depth else 'img0.jpg'
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b'')
            expected.add(rel)
        
        files = Collector(max_workers=2).collect(str(tmp_path))
        
        assert relative(files, tmp_path) == expected
        assert len(files) == len(expected)
    
    def test_empty_directory(self, tmp_path):
        """Test an empty root yields an empty list."""
        assert Collector().collect(str(tmp_path)) == []
    
    def test_directory_named_like_photo_is_not_a_file(self, tmp_path):
        """Test directories are descended even if named *.jpg."""
        (tmp_path / 'album.jpg').mkdir()
        (tmp_path / 'album.jpg' / 'inner.jpg').write_bytes(b'')
        
        files = Collector().collect(str(tmp_path))
        
        assert relative(files, tmp_path) == {os.path.join('album.jpg', 'inner.jpg')}
    
    def test_symlinked_directory_not_followed(self, tmp_path):
        """Test symlinked directories are skipped, so cycles cannot loop."""
        (tmp_path / 'real').mkdir()
        (tmp_path / 'real' / 'a.jpg').write_bytes(b'')
        os.symlink(str(tmp_path), str(tmp_path / 'real' / 'loop'))
        
        files = Collector().collect(str(tmp_path))
        
        assert relative(files, tmp_path) == {os.path.join('real', 'a.jpg')}
    
    def test_root_is_file(self, tmp_path):
        """Test a root that is a file is an error."""
        photo = tmp_path / 'a.jpg'
        photo.write_bytes(b'')
        
        with pytest.raises(CollectionError) as exc_info:
            Collector().collect(str(photo))
        
        assert exc_info.value.path == str(photo)
    
    def test_missing_root(self, tmp_path):
        """Test a missing root is an error."""
        with pytest.raises(CollectionError):
            Collector().collect(str(tmp_path / 'missing'))
    
    def test_subdirectory_failure_fails_collection(self, tmp_path, mocker):
        """Test an unreadable subdirectory fails the whole collection."""
        for rel in ['a.jpg', 'ok/b.jpg', 'locked/c.jpg']:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b'')
        
        real_scandir = os.scandir
        locked = str(tmp_path / 'locked')
        
        def scandir(path):
            if path == locked:
                raise PermissionError(13, 'Permission denied', path)
            return real_scandir(path)
        
        mocker.patch('synothumb.collector.os.scandir', side_effect=scandir)
        
        with pytest.raises(CollectionError) as exc_info:
            Collector().collect(str(tmp_path))
        
        assert exc_info.value.path == locked
        assert isinstance(exc_info.value.cause, PermissionError)
