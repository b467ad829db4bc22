# Hand-picked seed list of common English words, not builder output.
# Replace by running 'codewords build' against Princeton WordNet.

NOUNS = (
    "abacus",
    "abbey",
    "acorn",
    "acrobat",
    "admiral",
    "adobe",
    "aerie",
    "agate",
    "airship",
    "albatross",
    "alcove",
    "alder",
    "almanac",
    "almond",
    "alpaca",
    "altar",
    "amethyst",
    "amulet",
    "anchor",
    "anemone",
    "angler",
    "antelope",
    "anthem",
    "anvil",
    "apex",
    "apple",
    "apricot",
    "aquarium",
    "arbor",
    "arcade",
    "archer",
    "archway",
    "armada",
    "arrow",
    "atlas",
    "atoll",
    "attic",
    "aurora",
    "avalanche",
    "avenue",
    "axle",
    "badger",
    "bagel",
    "ballad",
    "balloon",
    "bamboo",
    "banjo",
    "banner",
    "barge",
    "barley",
    "barn",
    "barrel",
    "basin",
    "basket",
    "bassoon",
    "bayou",
    "beacon",
    "beaker",
    "beaver",
    "beetle",
    "bell",
    "bench",
    "berry",
    "biscuit",
    "bison",
    "blanket",
    "blizzard",
    "blossom",
    "boat",
    "bobcat",
    "bonfire",
    "bonnet",
    "boulder",
    "bouquet",
    "bramble",
    "breeze",
    "brick",
    "bridge",
    "brook",
    "broom",
    "buffalo",
    "bugle",
    "bundle",
    "burrow",
    "butter",
    "button",
    "buzzard",
    "cabin",
    "cactus",
    "caldera",
    "camel",
    "canal",
    "candle",
    "canoe",
    "canopy",
    "canyon",
    "capstan",
    "caravan",
    "cardinal",
    "cargo",
    "carnival",
    "carousel",
    "carrot",
    "cascade",
    "castle",
    "catalog",
    "cavern",
    "cedar",
    "cellar",
    "chalice",
    "chamber",
    "chariot",
    "cherry",
    "chestnut",
    "chimney",
    "chisel",
    "cinder",
    "citadel",
    "clam",
    "clarinet",
    "cliff",
    "clock",
    "clover",
    "cobbler",
    "cocoa",
    "comet",
    "compass",
    "condor",
    "conifer",
    "copper",
    "coral",
    "cormorant",
    "cottage",
    "cougar",
    "coyote",
    "crane",
    "crater",
    "creek",
    "cricket",
    "crocus",
    "crown",
    "crystal",
    "cupboard",
    "current",
    "cutlass",
    "cypress",
    "daisy",
    "dancer",
    "delta",
    "desert",
    "dewdrop",
    "diamond",
    "dingo",
    "dolphin",
    "domino",
    "donkey",
    "dragon",
    "dragonfly",
    "drum",
    "dune",
    "dynamo",
    "eagle",
    "easel",
    "echo",
    "eclipse",
    "egret",
    "elbow",
    "elephant",
    "ember",
    "emerald",
    "engine",
    "estuary",
    "fable",
    "falcon",
    "fathom",
    "feather",
    "fennel",
    "ferret",
    "ferry",
    "fiddle",
    "field",
    "finch",
    "fjord",
    "flagon",
    "flamingo",
    "flannel",
    "flute",
    "forest",
    "fossil",
    "fountain",
    "foxglove",
    "freighter",
    "frigate",
    "fungus",
    "furnace",
    "gadget",
    "galaxy",
    "galleon",
    "garden",
    "garnet",
    "gazelle",
    "gecko",
    "geyser",
    "ginger",
    "giraffe",
    "glacier",
    "glade",
    "gondola",
    "goose",
    "gopher",
    "gourd",
    "granite",
    "grotto",
    "grove",
    "guitar",
    "gull",
    "habitat",
    "hammock",
    "hamster",
    "harbor",
    "harp",
    "harvest",
    "hatchet",
    "haven",
    "hawk",
    "hazelnut",
    "heather",
    "hedgehog",
    "helmet",
    "heron",
    "hickory",
    "hill",
    "hippo",
    "hollow",
    "honey",
    "horizon",
    "hornet",
    "hummingbird",
    "ibex",
    "iceberg",
    "igloo",
    "iguana",
    "inlet",
    "island",
    "ivory",
    "jackal",
    "jaguar",
    "jasmine",
    "javelin",
    "jellyfish",
    "jetty",
    "jewel",
    "journey",
    "juniper",
    "kayak",
    "kernel",
    "kestrel",
    "kettle",
    "keystone",
    "kiln",
    "kingfisher",
    "kite",
    "kitten",
    "koala",
    "ladder",
    "lagoon",
    "lantern",
    "larch",
    "lark",
    "lattice",
    "lemon",
    "lemur",
    "leopard",
    "lighthouse",
    "lilac",
    "lily",
    "limestone",
    "linden",
    "lizard",
    "llama",
    "lobster",
    "locket",
    "locust",
    "lotus",
    "lynx",
    "lyre",
    "magnet",
    "magnolia",
    "mallard",
    "mammoth",
    "mandolin",
    "mango",
    "mantis",
    "maple",
    "marble",
    "marigold",
    "marlin",
    "marsh",
    "meadow",
    "meteor",
    "mill",
    "minnow",
    "mirror",
    "mitten",
    "moat",
    "monsoon",
    "moose",
    "mosaic",
    "moth",
    "mountain",
    "mulberry",
    "musket",
    "narwhal",
    "nebula",
    "nectar",
    "needle",
    "nest",
    "nightingale",
    "nomad",
    "nugget",
    "nutmeg",
    "oasis",
    "oboe",
    "ocean",
    "ocelot",
    "octopus",
    "orbit",
    "orchard",
    "orchid",
    "oriole",
    "osprey",
    "ostrich",
    "otter",
    "paddle",
    "pagoda",
    "palace",
    "panda",
    "panther",
    "papaya",
    "parrot",
    "pasture",
    "pebble",
    "pelican",
    "pendulum",
    "penguin",
    "pepper",
    "petal",
    "pheasant",
    "piano",
    "pigeon",
    "pillar",
    "pinecone",
    "pioneer",
    "planet",
    "plateau",
    "plover",
    "plum",
    "pocket",
    "pond",
    "poplar",
    "poppy",
    "porcupine",
    "prairie",
    "prism",
    "puffin",
    "pumpkin",
    "pyramid",
    "quail",
    "quarry",
    "quartz",
    "quasar",
    "quill",
    "quilt",
    "quiver",
    "rabbit",
    "raccoon",
    "radish",
    "rainbow",
    "rapids",
    "raven",
    "reef",
    "reindeer",
    "ribbon",
    "ridge",
    "river",
    "robin",
    "rocket",
    "rooster",
    "rosebud",
    "ruby",
    "rudder",
    "saddle",
    "saffron",
    "sailboat",
    "salmon",
    "sandbar",
    "sapphire",
    "satchel",
    "savanna",
    "scarecrow",
    "schooner",
    "scroll",
    "seagull",
    "sequoia",
    "shadow",
    "shamrock",
    "shell",
    "shore",
    "shrub",
    "silo",
    "skylark",
    "sloop",
    "sparrow",
    "sphinx",
    "spider",
    "spindle",
    "spruce",
    "squirrel",
    "stallion",
    "starling",
    "summit",
    "sundial",
    "sunrise",
    "swallow",
    "swan",
    "sycamore",
    "tablet",
    "tambourine",
    "tangerine",
    "tapestry",
    "teacup",
    "teapot",
    "temple",
    "thicket",
    "thistle",
    "thrush",
    "thunder",
    "tiger",
    "timber",
    "toad",
    "topaz",
    "tornado",
    "tortoise",
    "toucan",
    "tower",
    "trellis",
    "trombone",
    "trout",
    "trumpet",
    "tulip",
    "tundra",
    "turnip",
    "turtle",
    "tusk",
    "umbrella",
    "unicorn",
    "urchin",
    "valley",
    "vanilla",
    "velvet",
    "violin",
    "volcano",
    "vulture",
    "wagon",
    "walnut",
    "walrus",
    "warbler",
    "waterfall",
    "weasel",
    "whale",
    "wheat",
    "whistle",
    "willow",
    "windmill",
    "wizard",
    "wolf",
    "wombat",
    "woodland",
    "wren",
    "yacht",
    "yarrow",
    "zebra",
    "zenith",
    "zephyr",
    "zinnia",
)
