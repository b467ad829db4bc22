# Hand-picked seed list of common English words, not builder output.
# Replace by running 'codewords build' against Princeton WordNet.

ADJECTIVES = (
    "abandoned",
    "able",
    "absolute",
    "academic",
    "acceptable",
    "acclaimed",
    "accurate",
    "aching",
    "acidic",
    "acoustic",
    "active",
    "actual",
    "adamant",
    "adept",
    "admirable",
    "adorable",
    "adventurous",
    "aerial",
    "agile",
    "agreeable",
    "airborne",
    "alert",
    "alive",
    "amber",
    "ambient",
    "ample",
    "amused",
    "ancient",
    "angular",
    "animated",
    "antique",
    "anxious",
    "apparent",
    "aquatic",
    "arctic",
    "arid",
    "aromatic",
    "artful",
    "astute",
    "athletic",
    "atomic",
    "attentive",
    "auburn",
    "august",
    "austere",
    "authentic",
    "autumnal",
    "average",
    "awake",
    "aware",
    "azure",
    "balmy",
    "bashful",
    "basic",
    "beloved",
    "benign",
    "better",
    "bitter",
    "bland",
    "blank",
    "blazing",
    "blissful",
    "blond",
    "bold",
    "boundless",
    "brave",
    "breezy",
    "brief",
    "bright",
    "brilliant",
    "brisk",
    "broad",
    "bronze",
    "bubbly",
    "bumpy",
    "burly",
    "busy",
    "calm",
    "candid",
    "capable",
    "careful",
    "caring",
    "casual",
    "cautious",
    "celestial",
    "central",
    "certain",
    "charming",
    "cheerful",
    "chief",
    "chilly",
    "civic",
    "classic",
    "clean",
    "clear",
    "clever",
    "cloudy",
    "coastal",
    "cobalt",
    "colorful",
    "colossal",
    "comic",
    "common",
    "compact",
    "complete",
    "concrete",
    "constant",
    "content",
    "cool",
    "copper",
    "cordial",
    "cosmic",
    "cozy",
    "crafty",
    "creamy",
    "creative",
    "crimson",
    "crisp",
    "crucial",
    "cubic",
    "curious",
    "curly",
    "current",
    "cyclic",
    "dainty",
    "damp",
    "dapper",
    "daring",
    "dazzling",
    "decent",
    "decisive",
    "deep",
    "definite",
    "deft",
    "delicate",
    "delightful",
    "dense",
    "devoted",
    "diligent",
    "direct",
    "distant",
    "divine",
    "docile",
    "dominant",
    "dormant",
    "dreamy",
    "dusky",
    "dusty",
    "dynamic",
    "eager",
    "early",
    "earnest",
    "earthy",
    "eastern",
    "easy",
    "eclectic",
    "elastic",
    "electric",
    "elegant",
    "elfin",
    "eloquent",
    "emerald",
    "eminent",
    "enchanted",
    "endless",
    "energetic",
    "enormous",
    "epic",
    "equal",
    "eternal",
    "ethereal",
    "even",
    "exact",
    "excellent",
    "exotic",
    "expert",
    "fabulous",
    "faint",
    "fair",
    "faithful",
    "famous",
    "fancy",
    "fearless",
    "feisty",
    "fertile",
    "festive",
    "fiery",
    "filmy",
    "final",
    "fine",
    "firm",
    "flashy",
    "fleet",
    "flexible",
    "floral",
    "fluent",
    "fluffy",
    "fluid",
    "flying",
    "foamy",
    "focal",
    "formal",
    "fragrant",
    "frank",
    "free",
    "fresh",
    "friendly",
    "frosty",
    "frugal",
    "full",
    "funny",
    "fuzzy",
    "gallant",
    "gaudy",
    "gentle",
    "genuine",
    "giant",
    "gifted",
    "gilded",
    "glad",
    "glassy",
    "gleaming",
    "global",
    "glossy",
    "golden",
    "graceful",
    "gracious",
    "grand",
    "granular",
    "grateful",
    "gravelly",
    "great",
    "green",
    "gritty",
    "grounded",
    "hallowed",
    "handsome",
    "handy",
    "happy",
    "hardy",
    "harmonious",
    "hasty",
    "hazel",
    "hazy",
    "healthy",
    "hearty",
    "heavenly",
    "hefty",
    "helpful",
    "heroic",
    "hidden",
    "hilly",
    "hollow",
    "honest",
    "hopeful",
    "humble",
    "humid",
    "hungry",
    "ideal",
    "idle",
    "immense",
    "immune",
    "indigo",
    "inner",
    "innocent",
    "intact",
    "intense",
    "inventive",
    "ironic",
    "ivory",
    "jade",
    "jagged",
    "jazzy",
    "jolly",
    "jovial",
    "joyful",
    "joyous",
    "judicious",
    "juicy",
    "jumbo",
    "junior",
    "just",
    "keen",
    "kind",
    "kindly",
    "kinetic",
    "knotty",
    "known",
    "lacy",
    "lanky",
    "large",
    "lasting",
    "lavish",
    "leafy",
    "lean",
    "legal",
    "lemony",
    "level",
    "light",
    "likely",
    "limber",
    "liquid",
    "literal",
    "little",
    "lively",
    "local",
    "lofty",
    "lone",
    "long",
    "loud",
    "lovely",
    "loyal",
    "lucid",
    "lucky",
    "lunar",
    "lush",
    "lyric",
    "magenta",
    "magic",
    "magnetic",
    "main",
    "majestic",
    "major",
    "mature",
    "maximal",
    "mellow",
    "melodic",
    "merry",
    "metallic",
    "mighty",
    "mild",
    "minimal",
    "minor",
    "minty",
    "mirthful",
    "misty",
    "mobile",
    "modern",
    "modest",
    "moist",
    "molten",
    "monthly",
    "mossy",
    "motley",
    "musical",
    "mutual",
    "mystic",
    "narrow",
    "native",
    "natural",
    "nautical",
    "neat",
    "needful",
    "nervy",
    "neutral",
    "next",
    "nifty",
    "nimble",
    "noble",
    "nocturnal",
    "normal",
    "notable",
    "novel",
    "oaken",
    "obedient",
    "oblong",
    "obvious",
    "oceanic",
    "ochre",
    "olive",
    "only",
    "opaque",
    "open",
    "optimal",
    "orange",
    "orderly",
    "organic",
    "original",
    "ornate",
    "outer",
    "oval",
    "pacific",
    "painless",
    "pale",
    "paper",
    "parallel",
    "patient",
    "peaceful",
    "pearly",
    "perfect",
    "perky",
    "personal",
    "placid",
    "plain",
    "planar",
    "pleasant",
    "plucky",
    "plump",
    "plush",
    "poetic",
    "polar",
    "polished",
    "polite",
    "popular",
    "portly",
    "positive",
    "potent",
    "precious",
    "precise",
    "premium",
    "pretty",
    "primal",
    "prime",
    "prompt",
    "proper",
    "proud",
    "prudent",
    "pure",
    "purple",
    "quaint",
    "quick",
    "quiet",
    "quirky",
    "radiant",
    "rapid",
    "rare",
    "rational",
    "ready",
    "real",
    "regal",
    "relaxed",
    "reliable",
    "remote",
    "resolute",
    "rich",
    "rigid",
    "ripe",
    "robust",
    "rocky",
    "roomy",
    "rosy",
    "rotund",
    "round",
    "royal",
    "rubber",
    "ruddy",
    "rugged",
    "rural",
    "rustic",
    "sacred",
    "safe",
    "salty",
    "sandy",
    "sane",
    "satin",
    "scarlet",
    "scenic",
    "secret",
    "secure",
    "serene",
    "serious",
    "shady",
    "shaggy",
    "sharp",
    "shiny",
    "short",
    "silent",
    "silken",
    "silky",
    "silver",
    "simple",
    "sincere",
    "sleek",
    "slender",
    "smart",
    "smooth",
    "snappy",
    "snowy",
    "snug",
    "sober",
    "social",
    "soft",
    "solar",
    "solid",
    "sonic",
    "sound",
    "spare",
    "sparkling",
    "special",
    "speedy",
    "spicy",
    "spiffy",
    "splendid",
    "sporty",
    "spotless",
    "spry",
    "square",
    "stable",
    "stark",
    "starry",
    "steady",
    "steep",
    "stellar",
    "sterling",
    "sticky",
    "stoic",
    "stormy",
    "stout",
    "straight",
    "strong",
    "sturdy",
    "subtle",
    "sudden",
    "sugary",
    "sunny",
    "super",
    "superb",
    "supreme",
    "swift",
    "tactful",
    "tall",
    "tame",
    "tangy",
    "tawny",
    "teal",
    "tender",
    "tense",
    "terrific",
    "thick",
    "thorough",
    "thrifty",
    "tidal",
    "tidy",
    "timely",
    "tiny",
    "tireless",
    "topical",
    "total",
    "tranquil",
    "tropical",
    "true",
    "trusty",
    "twilight",
    "ultimate",
    "unique",
    "united",
    "upbeat",
    "upper",
    "upright",
    "urban",
    "useful",
    "usual",
    "valiant",
    "valid",
    "vast",
    "velvet",
    "verbal",
    "vernal",
    "vibrant",
    "vigilant",
    "violet",
    "virtual",
    "visible",
    "vital",
    "vivid",
    "vocal",
    "wandering",
    "warm",
    "wary",
    "watery",
    "wavy",
    "wealthy",
    "weekly",
    "western",
    "whole",
    "wide",
    "wild",
    "windy",
    "winged",
    "wintry",
    "wise",
    "witty",
    "wooden",
    "woolly",
    "worthy",
    "yearly",
    "yellow",
    "young",
    "youthful",
    "zany",
    "zealous",
    "zesty",
    "zippy",
)
