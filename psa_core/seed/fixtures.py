"""Development fixture data.

Parents are referenced by secondary key (countries by ISO code, states and
cities by IBGE code) or, for addresses and users, by their position in the
lists below. Occurrence times are offsets subtracted from the seeding time.
"""

from datetime import timedelta

from psa_core.models import Intensity, Region

COUNTRIES = [
    ("Brazil", "BR", "BRA"),
    ("United States", "US", "USA"),
    ("Argentina", "AR", "ARG"),
    ("Chile", "CL", "CHL"),
    ("Colombia", "CO", "COL"),
]

# name, short name, region, IBGE code; all belong to Brazil
STATES_COUNTRY = "BRA"
STATES = [
    ("São Paulo", "SP", Region.SUDESTE, "35"),
    ("Rio de Janeiro", "RJ", Region.SUDESTE, "33"),
    ("Minas Gerais", "MG", Region.SUDESTE, "31"),
    ("Bahia", "BA", Region.NORDESTE, "29"),
    ("Paraná", "PR", Region.SUL, "41"),
    ("Rio Grande do Sul", "RS", Region.SUL, "43"),
    ("Pernambuco", "PE", Region.NORDESTE, "26"),
    ("Ceará", "CE", Region.NORDESTE, "23"),
    ("Pará", "PA", Region.NORTE, "15"),
    ("Goiás", "GO", Region.CENTRO_OESTE, "52"),
]

# name, short name, IBGE code, state IBGE code
CITIES = [
    ("São Paulo", "São Paulo", "3550308", "35"),
    ("Guarulhos", "Guarulhos", "3518800", "35"),
    ("Campinas", "Campinas", "3509502", "35"),
    ("São Bernardo do Campo", "SBC", "3548708", "35"),
    ("Santos", "Santos", "3548500", "35"),
    ("Rio de Janeiro", "Rio de Janeiro", "3304557", "33"),
    ("Niterói", "Niterói", "3303302", "33"),
    ("Nova Iguaçu", "Nova Iguaçu", "3303500", "33"),
    ("Belo Horizonte", "BH", "3106200", "31"),
    ("Uberlândia", "Uberlândia", "3170206", "31"),
]

# street, number, complement, neighborhood, city IBGE code
ADDRESSES = [
    ("Rua da Consolação", "1000", "Conjunto 101", "Consolação", "3550308"),
    ("Avenida Paulista", "1578", "Andar 12", "Bela Vista", "3550308"),
    ("Rua Augusta", "2690", "Loja 1", "Jardim Paulista", "3550308"),
    ("Rua Oscar Freire", "379", "Térreo", "Jardins", "3550308"),
    ("Avenida Brigadeiro Faria Lima", "3064", "Torre Norte", "Itaim Bibi", "3550308"),
    ("Avenida Atlântica", "1702", "Cobertura", "Copacabana", "3304557"),
    ("Rua Visconde de Pirajá", "550", "Loja A", "Ipanema", "3304557"),
    ("Avenida Rio Branco", "156", "15º Andar", "Centro", "3304557"),
    ("Avenida Afonso Pena", "1377", "Sala 201", "Centro", "3106200"),
    ("Rua da Bahia", "1148", "Conjunto 302", "Centro", "3106200"),
]

USERS = [12345, 23456, 34567, 45678, 56789, 67890, 78901, 89012, 90123, 11111]

POLICE_OPERATOR = "Polícia Civil"
POLICE_OWNERSHIP = "public"

# overpass id, name, short name, phone, email, latitude, longitude, address index
POLICE_DEPARTMENTS = [
    (
        "way/123456789", "1º Distrito Policial", "1º DP", "+5511999999999",
        "contato@policia.sp.gov.br", "-23.550520", "-46.633309", 0,
    ),
    (
        "way/234567890", "2º Distrito Policial", "2º DP", "+5511888888888",
        "contato2@policia.sp.gov.br", "-23.561414", "-46.656271", 1,
    ),
    (
        "way/345678901", "3º Distrito Policial", "3º DP", "+5511777777777",
        "contato3@policia.sp.gov.br", "-23.563280", "-46.653450", 2,
    ),
    (
        "way/456789012", "Delegacia de Copacabana", "DP Copacabana", "+5521666666666",
        "copacabana@policia.rj.gov.br", "-22.971177", "-43.182543", 5,
    ),
    (
        "way/567890123", "Delegacia Centro BH", "DP Centro BH", "+5531555555555",
        "centro@policia.mg.gov.br", "-19.924501", "-43.935071", 8,
    ),
]

NOW = timedelta(0)
ONE_HOUR = timedelta(hours=1)
TWO_HOURS = timedelta(hours=2)
ONE_DAY = timedelta(days=1)

# name, description, start, end, update offsets, active, intensity,
# address index, user index
OCCURRENCES = [
    (
        "Incêndio em Edifício Comercial",
        "Incêndio reportado no 5º andar de edifício comercial na Avenida Paulista. "
        "Bombeiros mobilizados.",
        TWO_HOURS, ONE_HOUR, ONE_HOUR, False, Intensity.HIGH, 1, 0,
    ),
    (
        "Acidente de Trânsito",
        "Colisão entre dois veículos na Rua da Consolação, próximo ao metrô. "
        "Trânsito intenso na região.",
        ONE_HOUR, None, NOW, True, Intensity.MODERATE, 0, 1,
    ),
    (
        "Assalto à Mão Armada",
        "Tentativa de assalto reportada na Rua Oscar Freire. Suspeito fugiu a pé.",
        ONE_DAY, ONE_DAY, ONE_DAY, False, Intensity.HIGH, 3, 2,
    ),
    (
        "Manifestação Pacífica",
        "Manifestação estudantil pacífica na Avenida Rio Branco. Trânsito desviado.",
        NOW, None, NOW, True, Intensity.LOW, 7, 3,
    ),
    (
        "Queda de Energia",
        "Queda de energia elétrica afetando o bairro de Copacabana. "
        "Concessionária trabalhando na solução.",
        ONE_HOUR, None, NOW, True, Intensity.MODERATE, 5, 4,
    ),
    (
        "Operação Policial",
        "Operação policial em andamento contra o tráfico de drogas na região central.",
        TWO_HOURS, None, ONE_HOUR, True, Intensity.SEVERE, 8, 5,
    ),
    (
        "Alagamento",
        "Alagamento na Rua Augusta devido ao rompimento de tubulação. Trânsito comprometido.",
        ONE_DAY, ONE_DAY, ONE_DAY, False, Intensity.MODERATE, 2, 6,
    ),
    (
        "Princípio de Incêndio",
        "Princípio de incêndio controlado em restaurante na Rua da Bahia. Sem feridos.",
        TWO_HOURS, ONE_HOUR, ONE_HOUR, False, Intensity.LOW, 9, 7,
    ),
    (
        "Suspeita de Bomba",
        "Objeto suspeito encontrado na estação de metrô. Área isolada preventivamente.",
        NOW, None, NOW, True, Intensity.CRITICAL, 4, 8,
    ),
    (
        "Evento Público",
        "Show ao ar livre na praia de Copacabana. Aumento da segurança na região.",
        NOW, None, NOW, True, Intensity.LOW, 6, 9,
    ),
]
