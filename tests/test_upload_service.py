import os
from io import BytesIO

import pytest

from diet_tracker.errors import InvalidType, NotFound, TooLarge
from diet_tracker.services import upload_service


def test_generate_filename_keeps_extension():
    name = upload_service.generate_filename("Dinner Plate.PNG")
    assert name.endswith(".png")
    assert len(name) == 32 + len(".png")


def test_generate_filename_ignores_path_and_missing_extension():
    assert "." not in upload_service.generate_filename("no_extension")
    assert "/" not in upload_service.generate_filename("../../etc/passwd.jpg")
    assert upload_service.generate_filename(None)


@pytest.mark.parametrize("original, ext", [
    ("фото.jpg", ".jpg"),
    ("照片.PNG", ".png"),
    ("C:\\Users\\me\\lunch.jpeg", ".jpeg"),
    ("plate.j\u00e9pg", ""),
    ("notes.", ""),
])
def test_generate_filename_keeps_only_plain_extensions(original, ext):
    name = upload_service.generate_filename(original)
    assert name == name[:32] + ext


def test_generate_filename_never_repeats():
    names = {upload_service.generate_filename("a.jpg") for _ in range(200)}
    assert len(names) == 200


def test_store_creates_directory_lazily(app, uploads_dir):
    assert not os.path.exists(uploads_dir)
    with app.app_context():
        name = upload_service.store(BytesIO(b"img"), "a.jpg", "image/jpeg", 3)
    with open(os.path.join(uploads_dir, name), "rb") as fh:
        assert fh.read() == b"img"


@pytest.mark.parametrize("mimetype", [None, "", "text/plain", "application/octet-stream", "video/mp4"])
def test_store_rejects_non_images(app, mimetype):
    with app.app_context():
        with pytest.raises(InvalidType):
            upload_service.store(BytesIO(b"x"), "a.jpg", mimetype)


def test_store_rejects_declared_size_before_writing(app, uploads_dir):
    with app.app_context():
        with pytest.raises(TooLarge):
            upload_service.store(BytesIO(b"x"), "a.jpg", "image/jpeg", 10 * 1024 * 1024 + 1)
    assert not os.path.exists(uploads_dir)


def test_store_enforces_limit_while_streaming(app, uploads_dir):
    app.config["MAX_UPLOAD_BYTES"] = 1000
    with app.app_context():
        upload_service.store(BytesIO(b"x" * 1000), "ok.jpg", "image/jpeg")
        with pytest.raises(TooLarge):
            upload_service.store(BytesIO(b"x" * 1001), "big.jpg", "image/jpeg")
    assert len(os.listdir(uploads_dir)) == 1


def test_remove_is_best_effort(app, uploads_dir):
    with app.app_context():
        name = upload_service.store(BytesIO(b"img"), "a.jpg", "image/jpeg")
        assert upload_service.remove(name) is True
        assert not os.path.exists(os.path.join(uploads_dir, name))
        # Already gone is still fine
        assert upload_service.remove(name) is True
        assert upload_service.remove("../outside.jpg") is False


def test_path_for_rejects_escaping_names(app):
    with app.app_context():
        with pytest.raises(NotFound):
            upload_service.path_for("../secret.txt")
        with pytest.raises(NotFound):
            upload_service.path_for("nested/file.jpg")
