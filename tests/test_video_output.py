from pytest_displayfuzz.domains.fuzzing.video_output import VideoOutputFuzzer


def test_video_outputs_are_unplugged_and_named_like_windows():
    video_outputs = VideoOutputFuzzer.generate_several(3)

    assert [video_output.device_path for video_output in video_outputs] == [
        "\\\\.\\DISPLAY1",
        "\\\\.\\DISPLAY2",
        "\\\\.\\DISPLAY3",
    ]
    assert not any(video_output.is_plugged for video_output in video_outputs)


def test_device_paths_are_distinct():
    video_outputs = VideoOutputFuzzer.generate_several(162)

    assert len({video_output.device_path for video_output in video_outputs}) == 162


def test_no_video_output():
    assert VideoOutputFuzzer.generate_several(0) == []
