import pytest

from simario.constants import EnvVars
from simario.domain.entities import CodeTable
from simario.domain.services import Dictionary


@pytest.fixture(autouse=True)
def _clean_simario_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer SIMARIO_* settings from leaking into tests."""
    for name in (
        EnvVars.DESCRIPTIONS_FILE,
        EnvVars.CODINGS_FILE,
        EnvVars.BASELINE_WEIGHTING,
        EnvVars.SCENARIO_LABEL,
        EnvVars.ENCODING,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def code_tables() -> dict[str, CodeTable]:
    return {
        "r1stchildethn": CodeTable.from_mapping(
            "r1stchildethn", {1: "European", 2: "Maori", 3: "Pacific"}
        ),
        "z1singleLvl1": CodeTable.from_mapping("z1singleLvl1", {0: "No", 1: "Yes"}),
        "SESBTH": CodeTable.from_pairs(
            "SESBTH", [("Professional", 1), ("Clerical", 2), ("Semi-skilled", 3)]
        ),
    }


@pytest.fixture
def dictionary(code_tables: dict[str, CodeTable]) -> Dictionary:
    return Dictionary(
        descriptions={
            "kids": "Number of children",
            "r1stchildethn": "Ethnicity of first child",
            "z1singleLvl1": "Single parent",
            "SESBTH": "Socio-economic status at birth",
            "gptotvis": "GP visits",
            "blank": "",
        },
        code_tables=code_tables,
    )


@pytest.fixture
def dictionary_files(tmp_path):
    """Descriptions and codings CSV files as maintained by study teams."""
    descriptions = tmp_path / "descriptions.csv"
    descriptions.write_text(
        "Varname,Description,Notes\n"
        "kids,Number of children,\n"
        "SESBTH,SES at birth,from birth records\n"
        "r1stchildethn,Ethnicity,\n"
        "z1singleLvl1,Single parent,\n"
        ",,\n",
        encoding="utf-8",
    )
    codings = tmp_path / "codings.csv"
    codings.write_text(
        "Varname,CodingsExpr\n"
        'SESBTH,"c(""Professional""=1, ""Clerical""=2, ""Semi-skilled""=3)"\n'
        'r1stchildethn,"c(""European""=1, ""Maori""=2, ""Pacific""=3)"\n'
        'z1singleLvl1,"c(No=0, Yes=1)"\n'
        "kids,\n",
        encoding="utf-8",
    )
    return descriptions, codings
