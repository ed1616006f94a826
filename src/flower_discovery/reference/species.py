"""Bundled botanical species records.

Each record is immutable reference data keyed by ``scientific_name``.
``blooming_season`` is free text; the selector matches season names
against it case-insensitively ("Late spring to early summer" matches both
"Spring" and "Summer").

Adding a species: append a ``BotanicalSpecies`` to ``SPECIES``. The
scientific name must be unique.
"""

from __future__ import annotations

from dataclasses import dataclass

from flower_discovery.schemas import Continent, RarityLevel

_NA = Continent.NORTH_AMERICA
_SA = Continent.SOUTH_AMERICA
_EU = Continent.EUROPE
_AF = Continent.AFRICA
_AS = Continent.ASIA
_OC = Continent.OCEANIA


@dataclass(frozen=True)
class BotanicalSpecies:
    """A real-world species the app can discover."""

    scientific_name: str
    common_names: tuple[str, ...]
    family: str
    native_regions: tuple[str, ...]
    blooming_season: str
    conservation_status: str
    uses: tuple[str, ...]
    facts: tuple[str, ...]
    care_instructions: str
    rarity: RarityLevel
    continents: tuple[Continent, ...]
    habitat: str
    description: str
    image_prompt: str

    @property
    def primary_common_name(self) -> str:
        return self.common_names[0] if self.common_names else self.scientific_name

    @property
    def primary_continent(self) -> Continent:
        return self.continents[0] if self.continents else Continent.NORTH_AMERICA


SPECIES: tuple[BotanicalSpecies, ...] = (
    # -- Roses (Rosaceae) -----------------------------------------------------
    BotanicalSpecies(
        scientific_name="Rosa damascena",
        common_names=("Damask Rose", "Bulgarian Rose", "Rose of Castile"),
        family="Rosaceae",
        native_regions=("Middle East", "Central Asia", "Bulgaria"),
        blooming_season="Late spring to early summer",
        conservation_status="Least Concern",
        uses=("Essential oil production", "Perfumery", "Culinary"),
        facts=(
            "Source of Bulgarian rose oil, the most expensive rose oil in the world",
            "About 4,000 kg of petals yield 1 kg of oil",
        ),
        care_instructions="Well-drained soil and full sun. Prune in late winter.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_EU, _AS),
        habitat="Temperate gardens and hillsides",
        description="Highly fragrant double pink flowers with velvety petals",
        image_prompt="Rosa damascena damask rose with double pink fragrant flowers, velvety petals",
    ),
    BotanicalSpecies(
        scientific_name="Rosa gallica",
        common_names=("French Rose", "Rose of Provins"),
        family="Rosaceae",
        native_regions=("Southern Europe", "Western Asia"),
        blooming_season="Early to mid-summer",
        conservation_status="Least Concern",
        uses=("Perfumery", "Traditional medicine", "Ornamental"),
        facts=(
            "One of the oldest roses in cultivation",
            "Petals keep their fragrance when dried",
        ),
        care_instructions="Hardy and disease-resistant. Tolerates poor soils.",
        rarity=RarityLevel.COMMON,
        continents=(_EU,),
        habitat="Mediterranean climates and temperate regions",
        description="Deep pink semi-double flowers with golden stamens",
        image_prompt="Rosa gallica french rose, deep pink semi-double flowers, golden stamens",
    ),
    BotanicalSpecies(
        scientific_name="Prunus serrulata",
        common_names=("Japanese Cherry", "Oriental Cherry", "Hill Cherry"),
        family="Rosaceae",
        native_regions=("Japan", "Korea", "China"),
        blooming_season="Spring",
        conservation_status="Least Concern",
        uses=("Ornamental", "Cultural festivals"),
        facts=(
            "Celebrated during hanami, the Japanese flower-viewing festival",
            "Blossoms last only about a week",
        ),
        care_instructions="Full sun, moist well-drained soil. Prune after flowering.",
        rarity=RarityLevel.COMMON,
        continents=(_AS,),
        habitat="Temperate forests and cultivated areas",
        description="Clouds of pale pink blossoms on bare branches",
        image_prompt="Prunus serrulata japanese cherry blossom, pale pink petals on dark branches",
    ),
    # -- Orchids (Orchidaceae) ------------------------------------------------
    BotanicalSpecies(
        scientific_name="Cypripedium calceolus",
        common_names=("Lady's Slipper Orchid",),
        family="Orchidaceae",
        native_regions=("Europe", "Temperate Asia"),
        blooming_season="Late spring",
        conservation_status="Endangered in parts of its range",
        uses=("Ornamental",),
        facts=(
            "The pouch traps bees and forces them past the pollen",
            "Can take up to 16 years to flower from seed",
        ),
        care_instructions="Shaded woodland soil, never let it dry out.",
        rarity=RarityLevel.ENDANGERED,
        continents=(_EU, _AS),
        habitat="Calcareous woodland clearings",
        description="Yellow slipper-shaped pouch framed by maroon twisted petals",
        image_prompt="Cypripedium calceolus lady's slipper orchid, yellow pouch, maroon petals",
    ),
    BotanicalSpecies(
        scientific_name="Vanilla planifolia",
        common_names=("Vanilla Orchid", "Flat-leaved Vanilla"),
        family="Orchidaceae",
        native_regions=("Mexico", "Central America"),
        blooming_season="Spring",
        conservation_status="Endangered",
        uses=("Flavouring", "Perfumery"),
        facts=(
            "Each flower opens for a single day",
            "Outside Mexico it is pollinated by hand",
        ),
        care_instructions="Warm humid shade with a support to climb.",
        rarity=RarityLevel.RARE,
        continents=(_NA,),
        habitat="Tropical rainforest understory",
        description="Waxy pale greenish-yellow flowers on a climbing vine",
        image_prompt="Vanilla planifolia vanilla orchid, waxy pale yellow flower on green vine",
    ),
    BotanicalSpecies(
        scientific_name="Dendrobium nobile",
        common_names=("Noble Dendrobium",),
        family="Orchidaceae",
        native_regions=("Himalayas", "Southeast Asia"),
        blooming_season="Winter to early spring",
        conservation_status="Least Concern",
        uses=("Ornamental", "Traditional medicine"),
        facts=(
            "One of the fundamental herbs of traditional Chinese medicine",
            "Flowers grow directly from the cane-like stems",
        ),
        care_instructions="Bright light, cool dry rest in winter to trigger blooms.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_AS,),
        habitat="Epiphytic on trees in montane forests",
        description="White petals tipped with magenta around a dark purple throat",
        image_prompt="Dendrobium nobile orchid, white petals with magenta tips, purple throat",
    ),
    # -- Lilies and bulbs -----------------------------------------------------
    BotanicalSpecies(
        scientific_name="Lilium candidum",
        common_names=("Madonna Lily",),
        family="Liliaceae",
        native_regions=("Balkans", "Middle East"),
        blooming_season="Early summer",
        conservation_status="Least Concern",
        uses=("Ornamental", "Religious symbolism"),
        facts=(
            "Cultivated for over 3,000 years",
            "Depicted in Minoan frescoes",
        ),
        care_instructions="Plant shallowly in late summer in alkaline soil.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_EU, _AS),
        habitat="Rocky slopes and old gardens",
        description="Pure white trumpet flowers with golden anthers",
        image_prompt="Lilium candidum madonna lily, pure white trumpet flowers, golden anthers",
    ),
    BotanicalSpecies(
        scientific_name="Tulipa gesneriana",
        common_names=("Garden Tulip", "Didier's Tulip"),
        family="Liliaceae",
        native_regions=("Central Asia", "Turkey"),
        blooming_season="Mid to late spring",
        conservation_status="Least Concern",
        uses=("Ornamental", "Cut flowers"),
        facts=(
            "Sparked the Dutch tulip mania of the 1630s",
            "Stems keep growing after being cut",
        ),
        care_instructions="Plant bulbs in autumn, full sun, sharp drainage.",
        rarity=RarityLevel.COMMON,
        continents=(_AS, _EU),
        habitat="Steppes and mountain slopes",
        description="Cup-shaped flowers in nearly every colour but true blue",
        image_prompt="Tulipa gesneriana garden tulip, cup-shaped red flower, smooth petals",
    ),
    BotanicalSpecies(
        scientific_name="Narcissus pseudonarcissus",
        common_names=("Wild Daffodil", "Lent Lily"),
        family="Amaryllidaceae",
        native_regions=("Western Europe",),
        blooming_season="Early spring",
        conservation_status="Least Concern",
        uses=("Ornamental", "Alzheimer's drug galantamine"),
        facts=(
            "National flower of Wales",
            "Its sap is toxic to other cut flowers in the same vase",
        ),
        care_instructions="Naturalises in grass; leave foliage to die back.",
        rarity=RarityLevel.COMMON,
        continents=(_EU,),
        habitat="Woodland, meadows and rocky ground",
        description="Pale yellow petals around a deeper yellow trumpet",
        image_prompt="Narcissus pseudonarcissus wild daffodil, pale yellow petals, yellow trumpet",
    ),
    # -- Daisies (Asteraceae) -------------------------------------------------
    BotanicalSpecies(
        scientific_name="Helianthus annuus",
        common_names=("Common Sunflower", "Annual Sunflower"),
        family="Asteraceae",
        native_regions=("North America",),
        blooming_season="Summer to early autumn",
        conservation_status="Least Concern",
        uses=("Oil seed", "Bird food", "Ornamental"),
        facts=(
            "Young flower heads track the sun across the sky",
            "Seed spirals follow the Fibonacci sequence",
        ),
        care_instructions="Full sun, sow directly after the last frost.",
        rarity=RarityLevel.COMMON,
        continents=(_NA,),
        habitat="Plains, prairies, and cultivated fields",
        description="Large golden ray flowers around a dark seed disc",
        image_prompt="Helianthus annuus sunflower, golden petals, large brown seed head",
    ),
    BotanicalSpecies(
        scientific_name="Echinacea purpurea",
        common_names=("Purple Coneflower",),
        family="Asteraceae",
        native_regions=("Eastern North America",),
        blooming_season="Mid to late summer",
        conservation_status="Least Concern",
        uses=("Herbal medicine", "Pollinator gardens"),
        facts=(
            "Named from the Greek for hedgehog, after its spiny cone",
            "A favourite nectar source for butterflies",
        ),
        care_instructions="Drought tolerant once established, full sun.",
        rarity=RarityLevel.COMMON,
        continents=(_NA,),
        habitat="Open woods and prairies",
        description="Drooping purple-pink rays around a spiky orange cone",
        image_prompt="Echinacea purpurea purple coneflower, pink drooping petals, orange cone",
    ),
    BotanicalSpecies(
        scientific_name="Chrysanthemum morifolium",
        common_names=("Florist's Daisy", "Hardy Garden Mum"),
        family="Asteraceae",
        native_regions=("China",),
        blooming_season="Late summer to autumn",
        conservation_status="Least Concern",
        uses=("Ornamental", "Tea", "Cut flowers"),
        facts=(
            "Symbol of the Japanese imperial family",
            "Cultivated in China since the 15th century BC",
        ),
        care_instructions="Pinch back until midsummer for bushy plants.",
        rarity=RarityLevel.COMMON,
        continents=(_AS,),
        habitat="Cultivated gardens",
        description="Dense pompom heads of layered petals in autumn colours",
        image_prompt="Chrysanthemum morifolium, dense pompom bloom, bronze layered petals",
    ),
    BotanicalSpecies(
        scientific_name="Dahlia pinnata",
        common_names=("Garden Dahlia",),
        family="Asteraceae",
        native_regions=("Mexico",),
        blooming_season="Summer to first frost",
        conservation_status="Least Concern",
        uses=("Ornamental", "Edible tubers"),
        facts=(
            "National flower of Mexico",
            "Aztecs grew dahlias as a food crop",
        ),
        care_instructions="Lift tubers after frost blackens the foliage.",
        rarity=RarityLevel.COMMON,
        continents=(_NA,),
        habitat="Mountain grasslands",
        description="Geometric blooms of layered petals in bold colours",
        image_prompt="Dahlia pinnata, geometric layered magenta petals, dark green leaves",
    ),
    # -- Southern hemisphere --------------------------------------------------
    BotanicalSpecies(
        scientific_name="Protea cynaroides",
        common_names=("King Protea", "Giant Protea", "Honeypot"),
        family="Proteaceae",
        native_regions=("South Africa",),
        blooming_season="Autumn to spring",
        conservation_status="Least Concern",
        uses=("Cut flowers", "Ornamental"),
        facts=(
            "National flower of South Africa",
            "Resprouts from an underground stem after wildfires",
        ),
        care_instructions="Acidic, very well-drained soil. No phosphorus fertiliser.",
        rarity=RarityLevel.RARE,
        continents=(_AF,),
        habitat="Fynbos vegetation on mountain slopes",
        description="Huge bowl of pink bracts around a silky central dome",
        image_prompt="Protea cynaroides king protea, pink pointed bracts, large silky dome",
    ),
    BotanicalSpecies(
        scientific_name="Strelitzia reginae",
        common_names=("Bird of Paradise", "Crane Flower"),
        family="Strelitziaceae",
        native_regions=("South Africa",),
        blooming_season="Year-round in suitable climates",
        conservation_status="Least Concern",
        uses=("Ornamental", "Cut flowers"),
        facts=(
            "Pollinated by sunbirds perching on the blue petals",
            "Official flower of Los Angeles",
        ),
        care_instructions="Warm sun, regular water, feed in summer.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_AF,),
        habitat="Coastal areas and river banks",
        description="Orange and blue flowers shaped like a bird's crested head",
        image_prompt="Strelitzia reginae bird of paradise, orange and blue crest flower",
    ),
    BotanicalSpecies(
        scientific_name="Acacia dealbata",
        common_names=("Silver Wattle", "Mimosa"),
        family="Fabaceae",
        native_regions=("Southeastern Australia", "Tasmania"),
        blooming_season="Winter to early spring",
        conservation_status="Least Concern",
        uses=("Perfumery", "Ornamental"),
        facts=(
            "Given as a gift on International Women's Day in Italy",
            "Flowers are balls of tiny stamens",
        ),
        care_instructions="Fast growing, full sun, shelter from hard frost.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_OC,),
        habitat="Open forests and woodland edges",
        description="Fluffy golden pompom flowers on silvery foliage",
        image_prompt="Acacia dealbata silver wattle, fluffy golden pompom flowers",
    ),
    BotanicalSpecies(
        scientific_name="Anigozanthos manglesii",
        common_names=("Red-and-green Kangaroo Paw",),
        family="Haemodoraceae",
        native_regions=("Southwest Western Australia",),
        blooming_season="Late winter to spring",
        conservation_status="Least Concern",
        uses=("Ornamental", "Cut flowers"),
        facts=(
            "Floral emblem of Western Australia",
            "Its velvety hairs dust honeyeaters with pollen",
        ),
        care_instructions="Sandy soil, full sun, cut spent stems to the base.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_OC,),
        habitat="Sandy heathland and woodland",
        description="Velvety green tubular flowers on bright red stems",
        image_prompt="Anigozanthos manglesii kangaroo paw, velvety green flowers, red stems",
    ),
    BotanicalSpecies(
        scientific_name="Passiflora edulis",
        common_names=("Passion Flower", "Purple Granadilla"),
        family="Passifloraceae",
        native_regions=("Southern Brazil", "Paraguay", "Argentina"),
        blooming_season="Spring to summer",
        conservation_status="Least Concern",
        uses=("Fruit", "Ornamental"),
        facts=(
            "Named by missionaries who saw the Passion in its structure",
            "Each flower lasts about a day",
        ),
        care_instructions="Warm sheltered wall, train on wires.",
        rarity=RarityLevel.COMMON,
        continents=(_SA,),
        habitat="Subtropical forest edges",
        description="Intricate white and purple corona filaments",
        image_prompt="Passiflora edulis passion flower, white petals, purple corona filaments",
    ),
    BotanicalSpecies(
        scientific_name="Puya raimondii",
        common_names=("Queen of the Andes",),
        family="Bromeliaceae",
        native_regions=("Peru", "Bolivia"),
        blooming_season="Flowers once after 80 years, usually in spring",
        conservation_status="Endangered",
        uses=("Ecological keystone",),
        facts=(
            "Largest species of bromeliad",
            "Its spike can carry 20,000 flowers",
        ),
        care_instructions="Not cultivated outside botanic gardens.",
        rarity=RarityLevel.VERY_RARE,
        continents=(_SA,),
        habitat="High Andean grasslands above 3,000 m",
        description="Towering flower spike covered in greenish-white blooms",
        image_prompt="Puya raimondii queen of the andes, towering flower spike, andean grassland",
    ),
    BotanicalSpecies(
        scientific_name="Hibiscus rosa-sinensis",
        common_names=("Chinese Hibiscus", "Shoeblackplant"),
        family="Malvaceae",
        native_regions=("East Asia",),
        blooming_season="Year-round in tropical climates",
        conservation_status="Least Concern",
        uses=("Ornamental", "Hair care", "Tea"),
        facts=(
            "National flower of Malaysia",
            "Individual flowers last a single day",
        ),
        care_instructions="Bright light, warmth, keep evenly moist.",
        rarity=RarityLevel.COMMON,
        continents=(_AS, _OC),
        habitat="Tropical gardens",
        description="Large red trumpet flowers with a long central staminal column",
        image_prompt="Hibiscus rosa-sinensis, large red flower, prominent staminal column",
    ),
    # -- Water and Mediterranean ----------------------------------------------
    BotanicalSpecies(
        scientific_name="Nelumbo nucifera",
        common_names=("Sacred Lotus", "Indian Lotus"),
        family="Nelumbonaceae",
        native_regions=("South Asia", "Southeast Asia"),
        blooming_season="Summer",
        conservation_status="Least Concern",
        uses=("Religious symbolism", "Culinary", "Medicinal"),
        facts=(
            "Leaves repel water through microscopic wax bumps",
            "Seeds have germinated after 1,300 years",
        ),
        care_instructions="Full sun in still shallow water.",
        rarity=RarityLevel.UNCOMMON,
        continents=(_AS,),
        habitat="Ponds, lakes, and slow-moving waterways",
        description="Pink flowers held high above round floating leaves",
        image_prompt="Nelumbo nucifera sacred lotus, pink petals above round leaves on water",
    ),
    BotanicalSpecies(
        scientific_name="Lavandula angustifolia",
        common_names=("English Lavender", "True Lavender"),
        family="Lamiaceae",
        native_regions=("Mediterranean",),
        blooming_season="Early to mid-summer",
        conservation_status="Least Concern",
        uses=("Essential oil", "Culinary", "Aromatherapy"),
        facts=(
            "Romans scented their baths with it",
            "Its name comes from the Latin lavare, to wash",
        ),
        care_instructions="Lean gritty soil, full sun, trim after flowering.",
        rarity=RarityLevel.COMMON,
        continents=(_EU,),
        habitat="Dry rocky Mediterranean hillsides",
        description="Slender spikes of fragrant violet flowers",
        image_prompt="Lavandula angustifolia english lavender, violet flower spikes",
    ),
    BotanicalSpecies(
        scientific_name="Magnolia grandiflora",
        common_names=("Southern Magnolia", "Bull Bay"),
        family="Magnoliaceae",
        native_regions=("Southeastern United States",),
        blooming_season="Late spring to summer",
        conservation_status="Least Concern",
        uses=("Ornamental", "Timber"),
        facts=(
            "Magnolias evolved before bees and are pollinated by beetles",
            "State flower of Mississippi and Louisiana",
        ),
        care_instructions="Deep acidic soil, shelter from cold winds.",
        rarity=RarityLevel.COMMON,
        continents=(_NA,),
        habitat="Lowland forests",
        description="Huge creamy white lemon-scented flowers",
        image_prompt="Magnolia grandiflora, huge creamy white flower, glossy dark leaves",
    ),
    BotanicalSpecies(
        scientific_name="Camellia japonica",
        common_names=("Japanese Camellia", "Common Camellia"),
        family="Theaceae",
        native_regions=("Japan", "Korea", "China"),
        blooming_season="Winter to early spring",
        conservation_status="Least Concern",
        uses=("Ornamental", "Seed oil"),
        facts=(
            "Flowers drop whole rather than petal by petal",
            "Some specimens in Japan are over 500 years old",
        ),
        care_instructions="Acidic soil, dappled shade, water in dry autumns.",
        rarity=RarityLevel.COMMON,
        continents=(_AS,),
        habitat="Forest understory and cultivated gardens",
        description="Glossy leaves and formal red rose-like blooms",
        image_prompt="Camellia japonica, formal double red bloom, glossy green leaves",
    ),
)
