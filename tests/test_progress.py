import uuid

import pytest

from nrclaunch.progress import (
    PER_STEP,
    STEP_COUNT,
    ClientProgressUpdate,
    ProgressKind,
    ProgressReceiver,
    ProgressStep,
    ProgressUpdate,
    get_max,
    get_progress,
)


def test_get_max_scales_by_hundred():
    assert get_max(0) == 0
    assert get_max(3) == 3 * 100


def test_get_progress_full_item_reaches_next_boundary():
    for idx in range(4):
        assert get_progress(idx, 37, 37) == get_max(idx + 1)
        assert get_progress(idx, 0, 37) == get_max(idx)


def test_get_progress_zero_maximum_does_not_divide_by_zero():
    assert get_progress(2, 0, 0) == get_max(2)


def test_set_max_and_set_to_max_agree():
    assert ProgressUpdate.set_max().kind is ProgressKind.MAX
    assert ProgressUpdate.set_to_max().kind is ProgressKind.PROGRESS
    assert ProgressUpdate.set_max().value == ProgressUpdate.set_to_max().value
    assert ProgressUpdate.set_max().value == STEP_COUNT * PER_STEP


@pytest.mark.parametrize("step", list(ProgressStep))
def test_step_bounds(step):
    start = ProgressUpdate.set_for_step(step, 0, 10)
    end = ProgressUpdate.set_for_step(step, 10, 10)
    assert start.value == step.index * PER_STEP
    assert end.value == (step.index + 1) * PER_STEP


def test_custom_server_steps_share_positions():
    server_jar = ProgressUpdate.set_for_step(ProgressStep.DOWNLOAD_CUSTOM_SERVER_JAR, 3, 10)
    jre = ProgressUpdate.set_for_step(ProgressStep.DOWNLOAD_JRE, 3, 10)
    assert server_jar == jre
    installer = ProgressUpdate.set_for_step(
        ProgressStep.DOWNLOAD_CUSTOM_SERVER_INSTALLER_JAR, 0, 10
    )
    client = ProgressUpdate.set_for_step(ProgressStep.DOWNLOAD_CLIENT_JAR, 0, 10)
    assert installer.value == client.value == 2 * PER_STEP


def test_set_for_step_zero_maximum_raises():
    with pytest.raises(ZeroDivisionError):
        ProgressUpdate.set_for_step(ProgressStep.DOWNLOAD_ASSETS, 0, 0)


def test_label_serialisation():
    update = ProgressUpdate.set_label("translation.launching")
    assert update.to_dict() == {"type": "label", "value": "translation.launching"}


@pytest.mark.parametrize(
    "update",
    [
        ProgressUpdate.set_max(),
        ProgressUpdate.set_progress(5),
        ProgressUpdate.set_label("translation.checkingJRE"),
    ],
)
def test_round_trip(update):
    assert ProgressUpdate.from_dict(update.to_dict()) == update


@pytest.mark.parametrize(
    "data",
    [
        {"type": "other", "value": 1},
        {"type": "max"},
        {"type": "label", "value": 3},
        {"type": "progress", "value": "x"},
    ],
)
def test_from_dict_rejects_bad_input(data):
    with pytest.raises(ValueError):
        ProgressUpdate.from_dict(data)


def test_client_update_uses_instance_id_key():
    instance = uuid.uuid4()
    update = ClientProgressUpdate(instance, ProgressUpdate.set_progress(0))
    assert update.to_dict() == {
        "instanceId": str(instance),
        "data": {"type": "progress", "value": 0},
    }


def test_receiver_tracks_state_and_forwards():
    seen = []
    receiver = ProgressReceiver(seen.append)
    receiver.progress_update(ProgressUpdate.set_max())
    receiver.progress_update(ProgressUpdate.set_progress(7))
    receiver.progress_update(ProgressUpdate.set_label("translation.launching"))
    assert receiver.maximum == STEP_COUNT * PER_STEP
    assert receiver.progress == 7
    assert receiver.label == "translation.launching"
    assert len(seen) == 3