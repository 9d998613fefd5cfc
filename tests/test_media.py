"""Integration tests for media moderation and file promotion."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from cbody_ops.base import constants
from cbody_ops.config.database import db
from cbody_ops.models import GirlMedia


pytestmark = pytest.mark.integration

TMP = constants.BUCKET_TMP_UPLOADS
PUBLIC = constants.BUCKET_GIRLS_MEDIA


def pending_image(seed, storage, girl, **fields):
    media = seed.media(girl, **fields)
    storage.put(TMP, media.storage_key)
    return media


def reload(media_id):
    db.session.expire_all()
    return db.session.get(GirlMedia, media_id)


class TestApprove:

    def test_promotes_image_to_public_bucket(self, client, headers, seed, storage):
        girl = seed.girl()
        media = pending_image(seed, storage, girl)
        source = media.storage_key

        response = client.post(f"/media/{media.id}/approve", json={"min_user_level": 3}, headers=headers("admin"))

        assert response.status_code == 200
        expected = f"{girl.id}/{media.id}_image.jpg"
        assert storage.keys(PUBLIC) == [expected]
        assert source not in storage.keys(TMP)

        row = reload(media.id)
        assert row.status == "approved"
        assert row.storage_key == expected
        assert row.min_user_level == 3
        assert row.reviewed_by == "admin-id"

    def test_promotes_thumbnail(self, client, headers, seed, storage):
        girl = seed.girl()
        media = pending_image(seed, storage, girl, thumb_key=f"{girl.id}/thumb.jpg")
        storage.put(TMP, media.thumb_key)

        client.post(f"/media/{media.id}/approve", headers=headers())

        assert f"{girl.id}/{media.id}_thumb.jpg" in storage.keys(PUBLIC)
        assert reload(media.id).thumb_key == f"{girl.id}/{media.id}_thumb.jpg"

    def test_approving_twice_conflicts(self, client, headers, seed, storage):
        media = pending_image(seed, storage, seed.girl())
        client.post(f"/media/{media.id}/approve", headers=headers())

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 409
        assert response.get_json()["error_code"] == "MEDIA_ALREADY_APPROVED"

    def test_cap_per_therapist(self, client, headers, seed, storage):
        girl = seed.girl()
        for _ in range(constants.MEDIA_MAX_PER_GIRL):
            seed.media(girl, status="approved")
        media = pending_image(seed, storage, girl)

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "MEDIA_LIMIT_REACHED"
        assert reload(media.id).status == "pending"

    def test_rejected_media_does_not_count_towards_cap(self, client, headers, seed, storage):
        girl = seed.girl()
        for _ in range(constants.MEDIA_MAX_PER_GIRL):
            seed.media(girl, status="rejected")
        media = pending_image(seed, storage, girl)

        assert client.post(f"/media/{media.id}/approve", headers=headers()).status_code == 200

    def test_missing_source_file(self, client, headers, seed):
        media = seed.media(seed.girl())

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 502
        assert reload(media.id).status == "pending"

    def test_missing_thumbnail_keeps_old_key(self, client, headers, seed, storage):
        girl = seed.girl()
        media = pending_image(seed, storage, girl, thumb_key=f"{girl.id}/gone.jpg")
        source = media.storage_key

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 200
        row = reload(media.id)
        assert row.status == "approved"
        assert row.storage_key == f"{girl.id}/{media.id}_image.jpg"
        assert row.thumb_key == f"{girl.id}/gone.jpg"
        assert storage.keys(PUBLIC) == [row.storage_key]
        assert source not in storage.keys(TMP)

    def test_failed_commit_keeps_sources(self, client, headers, seed, storage, monkeypatch):
        girl = seed.girl()
        media = pending_image(seed, storage, girl, thumb_key=f"{girl.id}/thumb.jpg")
        storage.put(TMP, media.thumb_key)
        auth = headers()

        def broken_commit():
            raise SQLAlchemyError("connection lost")

        monkeypatch.setattr(db.session, "commit", broken_commit)

        response = client.post(f"/media/{media.id}/approve", headers=auth)

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "MEDIA_APPROVE_FAILED"
        assert storage.keys(PUBLIC) == []
        assert sorted([media.storage_key, media.thumb_key]) == storage.keys(TMP)

        row = reload(media.id)
        assert row.status == "pending"
        assert row.storage_key in storage.keys(TMP)

    def test_live_photo_moves_both_parts(self, client, headers, seed, storage):
        girl = seed.girl()
        media = seed.media(girl, kind="live_photo", storage_key=None,
                           meta={"live": {"image_key": "raw/a.jpg", "video_key": "raw/a.mov"}})
        storage.put(TMP, "raw/a.jpg")
        storage.put(TMP, "raw/a.mov")

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 200
        row = reload(media.id)
        assert row.meta["live"] == {
            "image_key": f"{girl.id}/{media.id}_image.jpg",
            "video_key": f"{girl.id}/{media.id}_video.mov",
        }
        assert row.storage_key == row.meta["live"]["video_key"]
        assert row.thumb_key == row.meta["live"]["image_key"]
        assert storage.keys(TMP) == []
        assert storage.keys(PUBLIC) == sorted([row.storage_key, row.thumb_key])

    def test_live_photo_rolls_back_image_when_video_fails(self, client, headers, seed, storage):
        girl = seed.girl()
        media = seed.media(girl, kind="live_photo", storage_key=None,
                           meta={"live": {"image_key": "raw/b.jpg", "video_key": "raw/b.mov"}})
        storage.put(TMP, "raw/b.jpg")
        storage.put(TMP, "raw/b.mov")
        storage.fail_uploads.add(f"{girl.id}/{media.id}_video.mov")

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 502
        assert storage.keys(PUBLIC) == []
        assert reload(media.id).status == "pending"
        assert storage.keys(TMP) == ["raw/b.jpg", "raw/b.mov"]

    def test_hosted_video_needs_no_copy(self, client, headers, seed, storage):
        media = seed.media(seed.girl(), kind="video", provider="cloudflare", storage_key=None,
                           meta={"cloudflare": {"uid": "cf-123"}})

        response = client.post(f"/media/{media.id}/approve", headers=headers())

        assert response.status_code == 200
        assert storage.keys(PUBLIC) == []
        assert reload(media.id).meta["cloudflare"] == {"uid": "cf-123", "ready": True}

    def test_batch_reports_failures(self, client, headers, seed, storage):
        media = pending_image(seed, storage, seed.girl())

        data = client.post(
            "/media/batch-approve",
            json={"ids": [media.id, "missing", media.id]},
            headers=headers(),
        ).get_json()["data"]

        assert data["succeeded"] == [media.id]
        assert [item["id"] for item in data["failed"]] == ["missing"]

    def test_support_cannot_moderate(self, client, headers, seed):
        media = seed.media(seed.girl())

        assert client.post(f"/media/{media.id}/approve", headers=headers("support")).status_code == 403


class TestManage:

    def test_reject_then_restore(self, client, headers, seed, storage):
        media = pending_image(seed, storage, seed.girl())

        rejected = client.post(f"/media/{media.id}/reject", json={"reason": "blurry"}, headers=headers())
        again = client.post(f"/media/{media.id}/reject", json={"reason": "blurry"}, headers=headers())
        restored = client.post(f"/media/{media.id}/restore", headers=headers())

        assert rejected.status_code == 200
        assert again.status_code == 409
        assert restored.status_code == 200

        row = reload(media.id)
        assert row.status == "pending"
        assert row.reject_reason is None
        assert media.storage_key in storage.keys(TMP)

    def test_reject_needs_reason(self, client, headers, seed):
        media = seed.media(seed.girl())

        assert client.post(f"/media/{media.id}/reject", json={"reason": " "}, headers=headers()).status_code == 400

    def test_restore_only_rejected(self, client, headers, seed):
        media = seed.media(seed.girl())

        response = client.post(f"/media/{media.id}/restore", headers=headers())

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "MEDIA_NOT_REJECTED"

    def test_level_only_for_approved(self, client, headers, seed):
        girl = seed.girl()
        pending = seed.media(girl)
        approved = seed.media(girl, status="approved")

        not_approved = client.put(f"/media/{pending.id}/level", json={"min_user_level": 2}, headers=headers())
        out_of_range = client.put(f"/media/{approved.id}/level", json={"min_user_level": 11}, headers=headers())
        missing = client.put(f"/media/{approved.id}/level", json={}, headers=headers())
        ok = client.put(f"/media/{approved.id}/level", json={"min_user_level": 10}, headers=headers())

        assert not_approved.get_json()["error_code"] == "MEDIA_NOT_APPROVED"
        assert out_of_range.status_code == 400
        assert missing.status_code == 400
        assert ok.get_json()["data"]["media"]["min_user_level"] == 10

    def test_delete_removes_pending_files(self, client, headers, seed, storage):
        media = pending_image(seed, storage, seed.girl())

        data = client.delete(f"/media/{media.id}", headers=headers()).get_json()["data"]

        assert data["files_removed"] is True
        assert storage.keys(TMP) == []
        assert reload(media.id) is None

    def test_delete_hosted_video(self, client, headers, seed, stream):
        media = seed.media(seed.girl(), kind="video", provider="cloudflare", status="approved",
                           storage_key=None, meta={"cloudflare": {"uid": "cf-9"}})

        client.delete(f"/media/{media.id}", headers=headers())

        assert stream.deleted == ["cf-9"]

    def test_delete_hosted_video_without_uid_uses_storage_key(self, client, headers, seed, stream, storage):
        media = seed.media(seed.girl(), kind="video", provider="cloudflare", status="approved",
                           storage_key="cf-legacy", meta={})

        client.delete(f"/media/{media.id}", headers=headers())

        assert stream.deleted == ["cf-legacy"]
        assert storage.objects == {}

    def test_delete_removes_live_photo_parts(self, client, headers, seed, storage):
        girl = seed.girl()
        image, video = f"{girl.id}/x_image.jpg", f"{girl.id}/x_video.mov"
        media = seed.media(girl, kind="live_photo", status="approved", storage_key=video, thumb_key=image,
                           meta={"live": {"image_key": image, "video_key": video}})
        storage.put(PUBLIC, image)
        storage.put(PUBLIC, video)
        storage.put(PUBLIC, f"{girl.id}/other.jpg")

        data = client.delete(f"/media/{media.id}", headers=headers()).get_json()["data"]

        assert data["files_removed"] is True
        assert storage.keys(PUBLIC) == [f"{girl.id}/other.jpg"]

    def test_reorder(self, client, headers, seed):
        girl, other = seed.girl(), seed.girl()
        first, second = seed.media(girl), seed.media(girl)
        foreign = seed.media(other)

        refused = client.post(
            "/media/reorder",
            json={"girl_id": girl.id, "items": [{"id": foreign.id, "sort_order": 0}]},
            headers=headers(),
        )
        done = client.post(
            "/media/reorder",
            json={"girl_id": girl.id, "items": [{"id": first.id, "sort_order": 2}, {"id": second.id, "sort_order": 1}]},
            headers=headers(),
        )

        assert refused.status_code == 400
        assert done.get_json()["data"]["updated"] == 2
        assert reload(first.id).sort_order == 2
        assert reload(second.id).sort_order == 1

    @pytest.mark.parametrize("items", [[], [{"id": "x"}], [{"id": "x", "sort_order": -1}]])
    def test_reorder_validation(self, client, headers, seed, items):
        girl = seed.girl()

        response = client.post("/media/reorder", json={"girl_id": girl.id, "items": items}, headers=headers())

        assert response.status_code == 400


class TestQueries:

    def test_stats_and_filters(self, client, headers, seed):
        girl = seed.girl()
        seed.media(girl)
        seed.media(girl, status="approved")
        seed.media(girl, status="approved")

        stats = client.get("/media/stats", headers=headers()).get_json()["data"]
        listed = client.get("/media/?status=approved", headers=headers()).get_json()["data"]

        assert stats == {"pending": 1, "approved": 2, "rejected": 0, "total": 3}
        assert len(listed["media"]) == 2
        assert all(item["bucket"] == PUBLIC for item in listed["media"])

    def test_signed_url(self, client, headers):
        data = client.post("/media/signed-url", json={"key": "g/1.jpg"}, headers=headers()).get_json()["data"]

        assert data["bucket"] == PUBLIC
        assert data["expires_in"] == constants.SIGNED_URL_DEFAULT_EXPIRES
        assert data["signed_url"].startswith(f"https://storage.test/{PUBLIC}/g/1.jpg")

    @pytest.mark.parametrize("payload", [
        {"key": ""},
        {"key": "a.jpg", "bucket": constants.BUCKET_CHAT_IMAGES},
        {"key": "a.jpg", "expires_in": 10},
    ])
    def test_signed_url_validation(self, client, headers, payload):
        assert client.post("/media/signed-url", json=payload, headers=headers()).status_code == 400
