"""Shared test data and doubles."""

HEADER = (
    "District,Block,Habitation Name,Facility Name,Address,"
    "Facility Category,Facility Subcategory,Lattitude,Longitude"
)

BIHAR_ROWS = [
    "Patna,Patna Sadar,Digha,Govt Primary School Digha,Digha Main Road, Education ,Primary School,25.6412,85.1020",
    "Patna,Patna Sadar,Digha,Digha PHC,Near Ghat,Healthcare,Primary Health Centre,25.6420,not-a-number",
    " patna ,Patna Sadar,Kurji,Kurji Hand Pump,Kurji Mor,Water Supply,Hand Pump,25.6300,85.1100",
    "Patna,Danapur,Shahpur,Shahpur Substation,Shahpur,Electricity,Substation,,85.0500",
    "Gaya,Bodh Gaya,Bakraur,Bakraur School,Bakraur,Education,Middle School,24.6950,84.9910",
]

ODISHA_ROWS = [
    "Khordha,Bhubaneswar,Patia,Patia Anganwadi,Patia Chowk,Education,Anganwadi,20.3500,85.8200",
]


def write_dataset(directory, state, rows):
    path = directory / f"{state}.csv"
    path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
    return path


class StubGenerator:
    """Records prompts and replays a canned reply (or raises)."""

    provider = "stub"

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply
