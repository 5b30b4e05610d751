from dashboard_ui import engagement_chart, engagement_frame, score_color, trait_chart, trait_frame


def test_score_colors():
    assert score_color(4.5) == "#059669"
    assert score_color(4.0) == "#2563eb"
    assert score_color(3.2) == "#2563eb"
    assert score_color(3.0) == "#e11d48"
    assert score_color(2.8) == "#e11d48"


def test_engagement_frame():
    df = engagement_frame()
    assert list(df["name"]) == ["Organization", "Job Role", "Vigor", "Support", "Recognition"]
    assert list(df["color"]) == ["#059669", "#2563eb", "#059669", "#2563eb", "#e11d48"]


def test_trait_frame_totals():
    df = trait_frame()
    assert df["value"].sum() == 120
    assert df.iloc[0]["name"] == "Executors"


def test_charts_serialize():
    bar = engagement_chart(engagement_frame()).to_dict()
    assert bar["mark"]["type"] == "bar"
    assert bar["encoding"]["x"]["scale"]["domain"] == [0, 5]

    donut = trait_chart(trait_frame()).to_dict()
    assert donut["mark"]["type"] == "arc"
    assert donut["encoding"]["color"]["scale"]["range"] == ["#2563eb", "#059669", "#ea580c", "#7c3aed"]
