"""Table layout shared by the row stores."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TableSpec:
    """Columns and constraints of one entity table.

    ``columns`` maps column name to its PostgreSQL type, excluding the
    generated ``id`` primary key. ``foreign_keys`` maps a column to the
    table it references.
    """

    name: str
    columns: dict[str, str]
    unique: tuple[str, ...] = ()
    foreign_keys: dict[str, str] = field(default_factory=dict)

    @property
    def column_names(self) -> list[str]:
        return list(self.columns)


TABLES: dict[str, TableSpec] = {
    "countries": TableSpec(
        name="countries",
        columns={
            "name": "TEXT NOT NULL",
            "short_name": "TEXT NOT NULL",
            "iso_code": "TEXT NOT NULL",
        },
        unique=("iso_code",),
    ),
    "states": TableSpec(
        name="states",
        columns={
            "name": "TEXT NOT NULL",
            "short_name": "TEXT NOT NULL",
            "region": "TEXT NOT NULL",
            "ibge_code": "TEXT NOT NULL",
            "country_id": "INTEGER NOT NULL",
        },
        unique=("ibge_code",),
        foreign_keys={"country_id": "countries"},
    ),
    "cities": TableSpec(
        name="cities",
        columns={
            "name": "TEXT NOT NULL",
            "short_name": "TEXT NOT NULL",
            "ibge_code": "TEXT NOT NULL",
            "state_id": "INTEGER NOT NULL",
        },
        unique=("ibge_code",),
        foreign_keys={"state_id": "states"},
    ),
    "addresses": TableSpec(
        name="addresses",
        columns={
            "street": "TEXT NOT NULL",
            "number": "TEXT NOT NULL",
            "complement": "TEXT NOT NULL",
            "neighborhood": "TEXT NOT NULL",
            "city_id": "INTEGER NOT NULL",
        },
        foreign_keys={"city_id": "cities"},
    ),
    "users": TableSpec(
        name="users",
        columns={
            "cognito_id": "INTEGER NOT NULL",
        },
        unique=("cognito_id",),
    ),
    "police_departments": TableSpec(
        name="police_departments",
        columns={
            "overpass_id": "TEXT NOT NULL",
            "name": "TEXT NOT NULL",
            "short_name": "TEXT NOT NULL",
            "operator": "TEXT NOT NULL",
            "ownership": "TEXT NOT NULL",
            "phone": "TEXT NOT NULL",
            "email": "TEXT NOT NULL",
            "latitude": "TEXT NOT NULL",
            "longitude": "TEXT NOT NULL",
            "address_id": "INTEGER NOT NULL",
        },
        unique=("overpass_id",),
        foreign_keys={"address_id": "addresses"},
    ),
    "occurrences": TableSpec(
        name="occurrences",
        columns={
            "name": "TEXT NOT NULL",
            "description": "TEXT NOT NULL",
            "date_start": "TIMESTAMPTZ NOT NULL",
            "date_end": "TIMESTAMPTZ",
            "date_update": "TIMESTAMPTZ",
            "active": "BOOLEAN NOT NULL",
            "intensity": "TEXT NOT NULL",
            "address_id": "INTEGER NOT NULL",
            "user_id": "INTEGER NOT NULL",
        },
        foreign_keys={"address_id": "addresses", "user_id": "users"},
    ),
}

# Parents before children
TABLE_ORDER: list[str] = [
    "countries",
    "states",
    "cities",
    "addresses",
    "users",
    "police_departments",
    "occurrences",
]
