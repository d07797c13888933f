# -*- coding: utf-8 -*-
"""
Module: alias_table.py
Package: config
Purpose: Static alias table and alias-priority items for chat item linking

Maps chat shorthand (lowercase) to the lowercase canonical item name it stands
for. Entries are applied in order, so a surface form listed twice resolves to
its LAST target. Several shorthands ("tbow", "acb", "fang") are declared in
more than one section.
Aliases whose target is not in the loaded vocabulary are dropped when the index
is finalized, so the table may mention items that do not exist in every
snapshot.

Examples:
    from config.alias_table import ITEM_ALIASES, ALIAS_PRIORITY_ITEMS

    ITEM_ALIASES['tbow']        # 'twisted bow'
    'scythe' in ALIAS_PRIORITY_ITEMS
"""

from typing import Dict, Iterable, Tuple


_ALIAS_ENTRIES = [
    # Weapons
    ("tbow", "twisted bow"),
    ("bp", "toxic blowpipe"),
    ("blowpipe", "toxic blowpipe"),
    ("acb", "armadyl crossbow"),
    ("dcb", "dragon crossbow"),
    ("zcb", "zaryte crossbow"),
    ("rcb", "rune crossbow"),
    ("msb", "magic shortbow"),
    ("ags", "armadyl godsword"),
    ("bgs", "bandos godsword"),
    ("sgs", "saradomin godsword"),
    ("zgs", "zamorak godsword"),
    ("dds", "dragon dagger"),
    ("dwh", "dragon warhammer"),
    ("dclaws", "dragon claws"),
    ("claws", "dragon claws"),
    ("sang", "sanguinesti staff"),
    ("scythe", "scythe of vitur"),
    ("rapier", "ghrazi rapier"),
    ("bowfa", "bow of faerdhinen"),
    ("bofa", "bow of faerdhinen"),
    ("fang", "osmumten's fang"),
    ("shadow", "tumeken's shadow"),
    ("kodai", "kodai wand"),
    ("harm", "harmonised nightmare staff"),
    ("volatile", "volatile nightmare staff"),
    ("eldritch", "eldritch nightmare staff"),
    ("gmaul", "granite maul"),
    ("tent", "abyssal tentacle"),
    ("whip", "abyssal whip"),
    ("dbow", "dark bow"),
    ("craw", "craw's bow"),
    ("craws", "craw's bow"),
    ("vigg", "viggora's chainmace"),
    ("thamm", "thammaron's sceptre"),
    ("elder maul", "elder maul"),
    ("voidwaker", "voidwaker"),
    ("sotd", "staff of the dead"),
    ("tsotd", "toxic staff of the dead"),
    ("toxic sotd", "toxic staff of the dead"),
    ("trident", "trident of the seas"),
    ("swamp trident", "trident of the swamp"),
    # Dragon items
    ("dscim", "dragon scimitar"),
    ("dlong", "dragon longsword"),
    ("dbaxe", "dragon battleaxe"),
    ("d2h", "dragon 2h sword"),
    ("dhally", "dragon halberd"),
    ("dspear", "dragon spear"),
    ("dchain", "dragon chainbody"),
    ("dlegs", "dragon platelegs"),
    ("dskirt", "dragon plateskirt"),
    ("dfh", "dragon full helm"),
    ("dmed", "dragon med helm"),
    ("dboots", "dragon boots"),
    ("dpick", "dragon pickaxe"),
    ("daxe", "dragon axe"),
    # Shields
    ("ely", "elysian spirit shield"),
    ("elysian", "elysian spirit shield"),
    ("arcane", "arcane spirit shield"),
    ("spectral", "spectral spirit shield"),
    ("dfs", "dragonfire shield"),
    ("dfw", "dragonfire ward"),
    ("buckler", "twisted buckler"),
    # Armor
    ("bcp", "bandos chestplate"),
    ("tassets", "bandos tassets"),
    ("tassies", "bandos tassets"),
    ("prims", "primordial boots"),
    ("pegs", "pegasian boots"),
    ("eternals", "eternal boots"),
    ("serp", "serpentine helm"),
    ("serp helm", "serpentine helm"),
    ("tanz helm", "tanzanite helm"),
    ("magma helm", "magma helm"),
    ("nezzy", "neitiznot faceguard"),
    ("faceguard", "neitiznot faceguard"),
    ("arma helm", "armadyl helmet"),
    ("arma chest", "armadyl chestplate"),
    ("arma legs", "armadyl chainskirt"),
    ("arma skirt", "armadyl chainskirt"),
    ("ancestral hat", "ancestral hat"),
    ("ancestral top", "ancestral robe top"),
    ("ancestral bottom", "ancestral robe bottom"),
    ("ancestral bottoms", "ancestral robe bottom"),
    # Jewelry
    ("fury", "amulet of fury"),
    ("torture", "amulet of torture"),
    ("anguish", "necklace of anguish"),
    ("tormented", "tormented bracelet"),
    ("occult", "occult necklace"),
    ("suffering", "ring of suffering"),
    ("b ring", "berserker ring"),
    ("b ring i", "berserker ring (i)"),
    ("zerker ring", "berserker ring"),
    ("archers ring", "archers ring"),
    ("seers ring", "seers ring"),
    ("warrior ring", "warrior ring"),
    ("lightbearer", "lightbearer"),
    ("ultor", "ultor ring"),
    ("venator", "venator ring"),
    ("magus", "magus ring"),
    ("bellator", "bellator ring"),
    # Third age aliases
    ("third age full helm", "3rd age full helmet"),
    ("third age helm", "3rd age full helmet"),
    ("third age platebody", "3rd age platebody"),
    ("third age platelegs", "3rd age platelegs"),
    ("third age kiteshield", "3rd age kiteshield"),
    ("third age mage hat", "3rd age mage hat"),
    ("third age robe top", "3rd age robe top"),
    ("third age robe", "3rd age robe"),
    ("third age range top", "3rd age range top"),
    ("third age range legs", "3rd age range legs"),
    ("third age range coif", "3rd age range coif"),
    ("third age vambraces", "3rd age vambraces"),
    ("third age cloak", "3rd age cloak"),
    ("third age longsword", "3rd age longsword"),
    ("third age bow", "3rd age bow"),
    ("third age wand", "3rd age wand"),
    ("third age amulet", "3rd age amulet"),
    ("third age druidic", "3rd age druidic robe top"),
    ("third age pickaxe", "3rd age pickaxe"),
    ("third age axe", "3rd age axe"),
    ("3a full helm", "3rd age full helmet"),
    ("3a platebody", "3rd age platebody"),
    ("3a platelegs", "3rd age platelegs"),
    ("3a kiteshield", "3rd age kiteshield"),
    ("3a mage hat", "3rd age mage hat"),
    ("3a robe top", "3rd age robe top"),
    ("3a robe", "3rd age robe"),
    ("3a range top", "3rd age range top"),
    ("3a range legs", "3rd age range legs"),
    ("3a range coif", "3rd age range coif"),
    ("3a vambraces", "3rd age vambraces"),
    ("3a cloak", "3rd age cloak"),
    ("3a longsword", "3rd age longsword"),
    ("3a bow", "3rd age bow"),
    ("3a wand", "3rd age wand"),
    ("3a amulet", "3rd age amulet"),
    ("3a pickaxe", "3rd age pickaxe"),
    ("3a axe", "3rd age axe"),
    # Barrows
    ("dharoks", "dharok's greataxe"),
    ("veracs", "verac's flail"),
    ("guthans", "guthan's warspear"),
    ("torags", "torag's hammers"),
    ("karils", "karil's crossbow"),
    ("ahrims", "ahrim's staff"),
    # Other popular items
    ("obby maul", "tzhaar-ket-om"),
    ("obby cape", "obsidian cape"),
    ("fire cape", "fire cape"),
    ("infernal", "infernal cape"),
    ("infernal cape", "infernal cape"),
    ("assembler", "ava's assembler"),
    ("max cape", "max cape"),
    ("dcape", "infernal cape"),
    ("fcape", "fire cape"),
    ("slay helm", "slayer helmet"),
    ("slayer helm", "slayer helmet"),
    ("black mask", "black mask"),
    ("phoenix", "phoenix"),
    ("pet", "pet"),
    # Material abbreviations - Ores
    ("addy ore", "adamantite ore"),
    ("addy ores", "adamantite ore"),
    ("adamantite ores", "adamantite ore"),
    ("mith ore", "mithril ore"),
    ("mith ores", "mithril ore"),
    ("mithril ores", "mithril ore"),
    ("rune ore", "runite ore"),
    ("rune ores", "runite ore"),
    ("runite ores", "runite ore"),
    ("iron ores", "iron ore"),
    ("coal ores", "coal"),
    ("gold ores", "gold ore"),
    ("silver ores", "silver ore"),
    ("copper ores", "copper ore"),
    ("tin ores", "tin ore"),
    # Material abbreviations - Bars
    ("addy bar", "adamantite bar"),
    ("addy bars", "adamantite bar"),
    ("adamantite bars", "adamantite bar"),
    ("mith bar", "mithril bar"),
    ("mith bars", "mithril bar"),
    ("mithril bars", "mithril bar"),
    ("rune bar", "runite bar"),
    ("rune bars", "runite bar"),
    ("runite bars", "runite bar"),
    ("iron bars", "iron bar"),
    ("steel bars", "steel bar"),
    ("gold bars", "gold bar"),
    ("silver bars", "silver bar"),
    ("bronze bars", "bronze bar"),
    # Dart tips
    ("addy dart tips", "adamant dart tip"),
    ("addy dart tip", "adamant dart tip"),
    ("adamant dart tips", "adamant dart tip"),
    ("mith dart tips", "mithril dart tip"),
    ("mith dart tip", "mithril dart tip"),
    ("mithril dart tips", "mithril dart tip"),
    ("rune dart tips", "rune dart tip"),
    ("rune dart tip", "rune dart tip"),
    ("dragon dart tips", "dragon dart tip"),
    ("dragon dart tip", "dragon dart tip"),
    ("iron dart tips", "iron dart tip"),
    ("steel dart tips", "steel dart tip"),
    ("bronze dart tips", "bronze dart tip"),
    # Darts
    ("addy darts", "adamant dart"),
    ("addy dart", "adamant dart"),
    ("mith darts", "mithril dart"),
    ("mith dart", "mithril dart"),
    ("rune darts", "rune dart"),
    ("dragon darts", "dragon dart"),
    ("ddarts", "dragon dart"),
    # Arrows
    ("addy arrows", "adamant arrow"),
    ("addy arrow", "adamant arrow"),
    ("mith arrows", "mithril arrow"),
    ("mith arrow", "mithril arrow"),
    ("rune arrows", "rune arrow"),
    ("dragon arrows", "dragon arrow"),
    ("amethyst arrows", "amethyst arrow"),
    ("iron arrows", "iron arrow"),
    ("steel arrows", "steel arrow"),
    ("bronze arrows", "bronze arrow"),
    # Bolts
    ("addy bolts", "adamant bolts"),
    ("mith bolts", "mithril bolts"),
    ("rune bolts", "runite bolts"),
    ("dragon bolts", "dragon bolts"),
    ("ruby bolts", "ruby bolts (e)"),
    ("diamond bolts", "diamond bolts (e)"),
    ("dragonstone bolts", "dragonstone bolts (e)"),
    ("onyx bolts", "onyx bolts (e)"),
    # Arrowtips
    ("addy arrowtips", "adamant arrowtips"),
    ("mith arrowtips", "mithril arrowtips"),
    ("rune arrowtips", "rune arrowtips"),
    ("dragon arrowtips", "dragon arrowtips"),
    ("amethyst arrowtips", "amethyst arrowtips"),
    # Common plurals
    ("feathers", "feather"),
    ("bones", "bones"),
    ("big bones", "big bones"),
    ("dragon bones", "dragon bones"),
    ("superior dragon bones", "superior dragon bones"),
    ("wyvern bones", "wyvern bones"),
    ("lava dragon bones", "lava dragon bones"),
    ("dagannoth bones", "dagannoth bones"),
    ("ensouled heads", "ensouled dragon head"),
    ("coins", "coins"),
    ("gp", "coins"),
    ("sharks", "shark"),
    ("anglers", "anglerfish"),
    ("anglerfish", "anglerfish"),
    ("mantas", "manta ray"),
    ("manta rays", "manta ray"),
    ("karams", "karambwan"),
    ("karambwans", "karambwan"),
    ("lobbies", "lobster"),
    ("lobsters", "lobster"),
    ("monks", "monkfish"),
    ("monkfish", "monkfish"),
    # Potions - always show (4) dose
    ("brews", "saradomin brew(4)"),
    ("brew", "saradomin brew(4)"),
    ("sara brew", "saradomin brew(4)"),
    ("sara brews", "saradomin brew(4)"),
    ("saradomin brew", "saradomin brew(4)"),
    ("saradomin brews", "saradomin brew(4)"),
    ("restores", "super restore(4)"),
    ("restore", "super restore(4)"),
    ("super restore", "super restore(4)"),
    ("super restores", "super restore(4)"),
    ("ppot", "prayer potion(4)"),
    ("ppots", "prayer potion(4)"),
    ("prayer pot", "prayer potion(4)"),
    ("prayer pots", "prayer potion(4)"),
    ("prayer potion", "prayer potion(4)"),
    ("prayer potions", "prayer potion(4)"),
    ("range pot", "ranging potion(4)"),
    ("range pots", "ranging potion(4)"),
    ("ranging pot", "ranging potion(4)"),
    ("ranging pots", "ranging potion(4)"),
    ("ranging potion", "ranging potion(4)"),
    ("ranging potions", "ranging potion(4)"),
    ("super combat", "super combat potion(4)"),
    ("super combats", "super combat potion(4)"),
    ("scb", "super combat potion(4)"),
    ("divine super combat", "divine super combat potion(4)"),
    ("divine super combats", "divine super combat potion(4)"),
    ("divine scb", "divine super combat potion(4)"),
    ("stam", "stamina potion(4)"),
    ("stams", "stamina potion(4)"),
    ("stamina", "stamina potion(4)"),
    ("staminas", "stamina potion(4)"),
    ("stamina pot", "stamina potion(4)"),
    ("stamina pots", "stamina potion(4)"),
    ("stamina potion", "stamina potion(4)"),
    ("stamina potions", "stamina potion(4)"),
    ("antifire", "antifire potion(4)"),
    ("antifires", "antifire potion(4)"),
    ("antifire pot", "antifire potion(4)"),
    ("antifire potion", "antifire potion(4)"),
    ("super antifire", "super antifire potion(4)"),
    ("super antifires", "super antifire potion(4)"),
    ("super antifire potion", "super antifire potion(4)"),
    ("extended antifire", "extended antifire(4)"),
    ("extended antifires", "extended antifire(4)"),
    ("extended super antifire", "extended super antifire(4)"),
    ("extended super antifires", "extended super antifire(4)"),
    ("antivenom", "anti-venom(4)"),
    ("antivenoms", "anti-venom(4)"),
    ("anti venom", "anti-venom(4)"),
    ("antivenom+", "anti-venom+(4)"),
    ("anti venom+", "anti-venom+(4)"),
    ("sanfew", "sanfew serum(4)"),
    ("sanfews", "sanfew serum(4)"),
    ("sanfew serum", "sanfew serum(4)"),
    ("sanfew serums", "sanfew serum(4)"),
    ("super att", "super attack(4)"),
    ("super attack", "super attack(4)"),
    ("super str", "super strength(4)"),
    ("super strength", "super strength(4)"),
    ("super def", "super defence(4)"),
    ("super defence", "super defence(4)"),
    ("super defense", "super defence(4)"),
    ("antipoison", "antipoison(4)"),
    ("super antipoison", "superantipoison(4)"),
    ("energy pot", "energy potion(4)"),
    ("energy potion", "energy potion(4)"),
    ("super energy", "super energy(4)"),
    ("magic pot", "magic potion(4)"),
    ("magic potion", "magic potion(4)"),
    ("bastion", "bastion potion(4)"),
    ("bastion pot", "bastion potion(4)"),
    ("bastion potion", "bastion potion(4)"),
    ("battlemage", "battlemage potion(4)"),
    ("battlemage pot", "battlemage potion(4)"),
    ("battlemage potion", "battlemage potion(4)"),
    ("divine ranging", "divine ranging potion(4)"),
    ("divine range", "divine ranging potion(4)"),
    ("divine bastion", "divine bastion potion(4)"),
    ("divine battlemage", "divine battlemage potion(4)"),
    ("imbued heart", "imbued heart"),
    ("saturated heart", "saturated heart"),
    # Herbs
    ("ranarrs", "ranarr weed"),
    ("ranarr", "ranarr weed"),
    ("snaps", "snapdragon"),
    ("snapdragons", "snapdragon"),
    ("torstols", "torstol"),
    ("toadflax", "toadflax"),
    ("kwuarms", "kwuarm"),
    ("cadantines", "cadantine"),
    ("lantadymes", "lantadyme"),
    ("dwarf weeds", "dwarf weed"),
    # Seeds
    ("ranarr seeds", "ranarr seed"),
    ("snapdragon seeds", "snapdragon seed"),
    ("torstol seeds", "torstol seed"),
    ("palm seeds", "palm tree seed"),
    ("palm tree seeds", "palm tree seed"),
    ("magic seeds", "magic seed"),
    ("dragonfruit seeds", "dragonfruit tree seed"),
    ("celastrus seeds", "celastrus seed"),
    ("redwood seeds", "redwood tree seed"),
    ("hespori seeds", "hespori seed"),
    # Logs
    ("yews", "yew logs"),
    ("yew logs", "yew logs"),
    ("magics", "magic logs"),
    ("magic logs", "magic logs"),
    ("redwoods", "redwood logs"),
    ("redwood logs", "redwood logs"),
    ("maples", "maple logs"),
    ("maple logs", "maple logs"),
    # Runes
    ("nats", "nature rune"),
    ("nature runes", "nature rune"),
    ("laws", "law rune"),
    ("law runes", "law rune"),
    ("deaths", "death rune"),
    ("death runes", "death rune"),
    ("bloods", "blood rune"),
    ("blood runes", "blood rune"),
    ("souls", "soul rune"),
    ("soul runes", "soul rune"),
    ("wraths", "wrath rune"),
    ("wrath runes", "wrath rune"),
    ("astrals", "astral rune"),
    ("astral runes", "astral rune"),
    ("cosmics", "cosmic rune"),
    ("cosmic runes", "cosmic rune"),
    ("chaos runes", "chaos rune"),
    ("fire runes", "fire rune"),
    ("water runes", "water rune"),
    ("air runes", "air rune"),
    ("earth runes", "earth rune"),
    ("mind runes", "mind rune"),
    ("body runes", "body rune"),
    # Gems
    ("zenytes", "zenyte"),
    ("onyxes", "onyx"),
    ("dragonstones", "dragonstone"),
    ("diamonds", "diamond"),
    ("rubies", "ruby"),
    ("emeralds", "emerald"),
    ("sapphires", "sapphire"),
    # Leather/hides
    ("black dhide", "black dragonhide"),
    ("black dhides", "black dragonhide"),
    ("black d'hide", "black dragonhide"),
    ("red dhide", "red dragonhide"),
    ("blue dhide", "blue dragonhide"),
    ("green dhide", "green dragonhide"),
    ("black dhide body", "black d'hide body"),
    ("black dhide chaps", "black d'hide chaps"),
    ("black dhide vambs", "black d'hide vambraces"),
    ("black d'hide vambs", "black d'hide vambraces"),
    # Essence
    ("pure ess", "pure essence"),
    ("pure essence", "pure essence"),
    ("rune ess", "rune essence"),
    ("rune essence", "rune essence"),
    ("daeyalt ess", "daeyalt essence"),
    ("daeyalt essence", "daeyalt essence"),
    # Orbs
    ("air orbs", "air orb"),
    ("water orbs", "water orb"),
    ("earth orbs", "earth orb"),
    ("fire orbs", "fire orb"),
    ("unpowered orbs", "unpowered orb"),
    # Battlestaves
    ("bstaves", "battlestaff"),
    ("bstaff", "battlestaff"),
    ("battlestaves", "battlestaff"),
    ("air bstaff", "air battlestaff"),
    ("water bstaff", "water battlestaff"),
    ("earth bstaff", "earth battlestaff"),
    ("fire bstaff", "fire battlestaff"),
    ("mystic air staff", "mystic air staff"),
    ("mystic water staff", "mystic water staff"),
    ("mystic earth staff", "mystic earth staff"),
    ("mystic fire staff", "mystic fire staff"),
    # Cannonballs
    ("cballs", "cannonball"),
    ("cball", "cannonball"),
    ("cannonballs", "cannonball"),
    # Javelin
    ("addy javs", "adamant javelin"),
    ("rune javs", "rune javelin"),
    ("dragon javs", "dragon javelin"),
    ("amethyst javs", "amethyst javelin"),
    ("javelins", "rune javelin"),
    # Knives
    ("rune knives", "rune knife"),
    ("dragon knives", "dragon knife"),
    ("dknives", "dragon knife"),
    ("dknife", "dragon knife"),
    # Thrown axes
    ("rune thrownaxes", "rune thrownaxe"),
    ("dragon thrownaxes", "dragon thrownaxe"),
    # Scales and resources
    ("zulrah scales", "zulrah's scales"),
    ("scales", "zulrah's scales"),
    ("snakeskin", "snakeskin"),
    ("snakeskins", "snakeskin"),
    ("mort myre fungus", "mort myre fungus"),
    ("mort myre fungi", "mort myre fungus"),
    ("white berries", "white berries"),
    ("whiteberries", "white berries"),
    ("limpwurt roots", "limpwurt root"),
    ("limpwurts", "limpwurt root"),
    ("red spiders eggs", "red spiders' eggs"),
    ("red spider eggs", "red spiders' eggs"),
    ("spider eggs", "red spiders' eggs"),
    ("crushed nests", "crushed nest"),
    ("bird nests", "bird nest"),
    ("nests", "bird nest"),
    ("dragon scale dust", "dragon scale dust"),
    ("wine of zamorak", "wine of zamorak"),
    ("zammy wines", "wine of zamorak"),
    ("zammy wine", "wine of zamorak"),
    ("potato cactus", "potato cactus"),
    ("potato cacti", "potato cactus"),
    ("goat horns", "goat horn dust"),
    ("goat horn", "goat horn dust"),
    ("unicorn horns", "unicorn horn dust"),
    ("unicorn horn", "unicorn horn dust"),
    # Secondaries
    ("eyes of newt", "eye of newt"),
    ("eye of newts", "eye of newt"),
    ("swamp tar", "swamp tar"),
    ("swamp tars", "swamp tar"),
    ("volcanic ash", "volcanic ash"),
    ("volcanic ashes", "volcanic ash"),
    ("crystal shards", "crystal shard"),
    ("shards", "crystal shard"),
    # Planks
    ("planks", "plank"),
    ("oak planks", "oak plank"),
    ("teak planks", "teak plank"),
    ("mahogany planks", "mahogany plank"),
    ("mahog planks", "mahogany plank"),
    ("mahog plank", "mahogany plank"),
    # Nails
    ("iron nails", "iron nails"),
    ("steel nails", "steel nails"),
    ("mith nails", "mithril nails"),
    ("addy nails", "adamantite nails"),
    ("rune nails", "rune nails"),
    # Ensouled heads
    ("ensouled giant heads", "ensouled giant head"),
    ("ensouled dragon heads", "ensouled dragon head"),
    ("ensouled demon heads", "ensouled demon head"),
    ("ensouled aviansie heads", "ensouled aviansie head"),
    ("ensouled abyssal heads", "ensouled abyssal head"),
    # Dragon items plural
    ("dragon bones", "dragon bones"),
    ("d bones", "dragon bones"),
    ("dbones", "dragon bones"),
    # Slayer items
    ("superiors", "superior dragon bones"),
    ("superior bones", "superior dragon bones"),
    ("imbued heart", "imbued heart"),
    ("eternal gem", "eternal gem"),
    ("dust bstaff", "dust battlestaff"),
    ("mist bstaff", "mist battlestaff"),
    ("smoke bstaff", "smoke battlestaff"),
    ("steam bstaff", "steam battlestaff"),
    # Keys
    ("larrans keys", "larran's key"),
    ("larran key", "larran's key"),
    ("larrans key", "larran's key"),
    ("brimstone keys", "brimstone key"),
    ("crystal keys", "crystal key"),
    # Clue items
    ("easy clues", "clue scroll (easy)"),
    ("easy clue", "clue scroll (easy)"),
    ("medium clues", "clue scroll (medium)"),
    ("medium clue", "clue scroll (medium)"),
    ("hard clues", "clue scroll (hard)"),
    ("hard clue", "clue scroll (hard)"),
    ("elite clues", "clue scroll (elite)"),
    ("elite clue", "clue scroll (elite)"),
    ("master clues", "clue scroll (master)"),
    ("master clue", "clue scroll (master)"),
    # Boss uniques
    ("mutagens", "tanzanite mutagen"),
    ("tanz mutagen", "tanzanite mutagen"),
    ("magma mutagen", "magma mutagen"),
    ("onyx", "onyx"),
    ("tanz fang", "tanzanite fang"),
    ("magic fang", "magic fang"),
    ("serp visage", "serpentine visage"),
    ("visage", "draconic visage"),
    ("skeletal visage", "skeletal visage"),
    ("wyvern visage", "wyvern visage"),
    ("jar of souls", "jar of souls"),
    ("jar of swamp", "jar of swamp"),
    ("jar of dirt", "jar of dirt"),
    ("jar of sand", "jar of sand"),
    ("jar of stone", "jar of stone"),
    ("jar of darkness", "jar of darkness"),
    ("jar of decay", "jar of decay"),
    ("jar of dreams", "jar of dreams"),
    ("jar of eyes", "jar of eyes"),
    ("jar of miasma", "jar of miasma"),
    ("jars", "jar of swamp"),
    ("pet snakeling", "pet snakeling"),
    ("snakeling", "pet snakeling"),
    ("olmlet", "olmlet"),
    ("little nightmare", "little nightmare"),
    ("lil zik", "lil' zik"),
    ("tumekens guardian", "tumeken's guardian"),
    ("elidinis guardian", "elidinis' guardian"),
    # ToB uniques
    ("avernic", "avernic defender hilt"),
    ("avernic hilt", "avernic defender hilt"),
    ("avernic defender", "avernic defender"),
    ("justi helm", "justiciar faceguard"),
    ("justi chest", "justiciar chestguard"),
    ("justi legs", "justiciar legguards"),
    ("justi faceguard", "justiciar faceguard"),
    ("justi chestguard", "justiciar chestguard"),
    ("justi legguards", "justiciar legguards"),
    ("sanguine dust", "sanguine dust"),
    ("sang dust", "sanguine dust"),
    ("holy ornament kit", "holy ornament kit"),
    ("sanguine ornament kit", "sanguine ornament kit"),
    # CoX uniques
    ("dex", "dexterous prayer scroll"),
    ("dex scroll", "dexterous prayer scroll"),
    ("dexterous", "dexterous prayer scroll"),
    ("arcane scroll", "arcane prayer scroll"),
    ("arc scroll", "arcane prayer scroll"),
    ("tbow", "twisted bow"),
    ("dhcb", "dragon hunter crossbow"),
    ("dragon hunter", "dragon hunter crossbow"),
    ("dhl", "dragon hunter lance"),
    ("dragon hunter lance", "dragon hunter lance"),
    ("din's bulwark", "dinh's bulwark"),
    ("dins bulwark", "dinh's bulwark"),
    ("dinhs bulwark", "dinh's bulwark"),
    ("dinhs", "dinh's bulwark"),
    ("bulwark", "dinh's bulwark"),
    ("elder maul", "elder maul"),
    ("anc hat", "ancestral hat"),
    ("anc top", "ancestral robe top"),
    ("anc bottom", "ancestral robe bottom"),
    ("anc bottoms", "ancestral robe bottom"),
    # ToA uniques
    ("fang", "osmumten's fang"),
    ("osmumtens fang", "osmumten's fang"),
    ("lightbearer", "lightbearer"),
    ("light bearer", "lightbearer"),
    ("shadow", "tumeken's shadow"),
    ("tumekens shadow", "tumeken's shadow"),
    ("masori mask", "masori mask"),
    ("masori body", "masori body"),
    ("masori chaps", "masori chaps"),
    ("masori helm", "masori mask"),
    ("masori top", "masori body"),
    ("masori legs", "masori chaps"),
    ("elidinis ward", "elidinis' ward"),
    ("ward", "elidinis' ward"),
    # GWD uniques
    ("acb", "armadyl crossbow"),
    ("arma crossbow", "armadyl crossbow"),
    ("arma cbow", "armadyl crossbow"),
    ("steam staff", "steam battlestaff"),
    ("zammy spear", "zamorakian spear"),
    ("zspear", "zamorakian spear"),
    ("zammy hasta", "zamorakian hasta"),
    ("zhasta", "zamorakian hasta"),
    ("sotd", "staff of the dead"),
    ("saradomin sword", "saradomin sword"),
    ("ss", "saradomin sword"),
    ("sara sword", "saradomin sword"),
    ("saras light", "saradomin's light"),
    ("sara light", "saradomin's light"),
    ("hilt", "armadyl hilt"),
    ("arma hilt", "armadyl hilt"),
    ("bandos hilt", "bandos hilt"),
    ("sara hilt", "saradomin hilt"),
    ("zammy hilt", "zamorak hilt"),
    # Misc equipment
    ("fury orn kit", "fury ornament kit"),
    ("torture orn kit", "torture ornament kit"),
    ("anguish orn kit", "anguish ornament kit"),
    ("tormented orn kit", "tormented ornament kit"),
    ("occult orn kit", "occult ornament kit"),
    ("dragon def", "dragon defender"),
    ("dragon defender", "dragon defender"),
    ("rune def", "rune defender"),
    ("rune defender", "rune defender"),
    ("avernic def", "avernic defender"),
    ("crystal helm", "crystal helm"),
    ("crystal body", "crystal body"),
    ("crystal legs", "crystal legs"),
    ("crystal bow", "crystal bow"),
    ("crystal shield", "crystal shield"),
    ("crystal hally", "crystal halberd"),
    ("chally", "crystal halberd"),
    # Misc supplies
    ("anglerfish", "anglerfish"),
    ("anglers", "anglerfish"),
    ("dark crabs", "dark crab"),
    ("dark crab", "dark crab"),
    ("tuna potatoes", "tuna potato"),
    ("tuna potato", "tuna potato"),
    ("pineapple pizzas", "pineapple pizza"),
    ("pineapple pizza", "pineapple pizza"),
    ("summer pies", "summer pie"),
    ("summer pie", "summer pie"),
    ("wild pies", "wild pie"),
    ("wild pie", "wild pie"),
    ("admiral pies", "admiral pie"),
    ("admiral pie", "admiral pie"),
    # Teleport items
    ("house tabs", "teleport to house"),
    ("house tab", "teleport to house"),
    ("varrock tabs", "varrock teleport"),
    ("varrock tab", "varrock teleport"),
    ("lumby tabs", "lumbridge teleport"),
    ("lumby tab", "lumbridge teleport"),
    ("fally tabs", "falador teleport"),
    ("fally tab", "falador teleport"),
    ("cammy tabs", "camelot teleport"),
    ("cammy tab", "camelot teleport"),
    ("ardy tabs", "ardougne teleport"),
    ("ardy tab", "ardougne teleport"),
    ("dueling ring", "ring of dueling(8)"),
    ("glory", "amulet of glory(6)"),
    ("glories", "amulet of glory(6)"),
    ("games necklace", "games necklace(8)"),
    ("games neck", "games necklace(8)"),
    ("games necks", "games necklace(8)"),
    ("skills necklace", "skills necklace(6)"),
    ("skills neck", "skills necklace(6)"),
    ("combat bracelet", "combat bracelet(6)"),
    ("combat brace", "combat bracelet(6)"),
    ("wealth", "ring of wealth"),
    ("row", "ring of wealth"),
    # Misc plurals and abbreviations
    ("zenny", "zenyte shard"),
    ("ballista limbs", "heavy ballista limbs"),
    ("ballista spring", "ballista spring"),
    ("monkey tail", "monkey tail"),
    ("monkey tails", "monkey tail"),
    ("heavy frame", "heavy frame"),
    ("light frame", "light frame"),
    ("heavy ballista", "heavy ballista"),
    ("light ballista", "light ballista"),
    ("dfs", "dragonfire shield"),
    ("anti dragon shield", "anti-dragon shield"),
    ("anti-dragon", "anti-dragon shield"),
    ("explorers ring", "explorer's ring 4"),
    ("explorers ring 4", "explorer's ring 4"),
    ("seers ring", "seers ring"),
    ("warriors ring", "warrior ring"),
    ("treasonous ring", "treasonous ring"),
    ("tyrannical ring", "tyrannical ring"),
    # Agility shortcuts
    ("graceful", "graceful hood"),
    ("graceful hood", "graceful hood"),
    ("graceful top", "graceful top"),
    ("graceful legs", "graceful legs"),
    ("graceful gloves", "graceful gloves"),
    ("graceful boots", "graceful boots"),
    ("graceful cape", "graceful cape"),
    ("marks of grace", "mark of grace"),
    ("marks", "mark of grace"),
    ("amylase", "amylase crystal"),
    ("amylase crystals", "amylase crystal"),
    # Ranged
    ("blowpipe", "toxic blowpipe"),
    ("bp", "toxic blowpipe"),
    ("acb", "armadyl crossbow"),
    ("dcb", "dragon crossbow"),
    ("rcb", "rune crossbow"),
    ("msb", "magic shortbow"),
    ("msbi", "magic shortbow (i)"),
    ("magic short", "magic shortbow"),
    ("magic shortbow i", "magic shortbow (i)"),
    ("ava's", "ava's assembler"),
    ("avas", "ava's assembler"),
    ("accumulator", "ava's accumulator"),
    ("attractor", "ava's attractor"),
    # Nex
    ("torva helm", "torva full helm"),
    ("torva body", "torva platebody"),
    ("torva legs", "torva platelegs"),
    ("torva plate", "torva platebody"),
    ("torva platebody", "torva platebody"),
    ("torva platelegs", "torva platelegs"),
    ("torva full helm", "torva full helm"),
    ("zaryte cbow", "zaryte crossbow"),
    ("zcb", "zaryte crossbow"),
    ("zaryte crossbow", "zaryte crossbow"),
    ("nihil horn", "nihil horn"),
    ("ancient hilt", "ancient hilt"),
    # Vorkath
    ("vork", "vorki"),
    ("vorki", "vorki"),
    # Hydra
    ("hydra claw", "hydra's claw"),
    ("hydra leather", "hydra leather"),
    ("hydra tail", "hydra tail"),
    ("hydra eye", "hydra's eye"),
    ("hydra fang", "hydra's fang"),
    ("hydra heart", "hydra's heart"),
    ("ferocious gloves", "ferocious gloves"),
    ("fero gloves", "ferocious gloves"),
    # Corp
    ("spirit shield", "spirit shield"),
    ("blessed spirit shield", "blessed spirit shield"),
    ("holy elixir", "holy elixir"),
    ("sigil", "elysian sigil"),
    ("ely sigil", "elysian sigil"),
    ("arcane sigil", "arcane sigil"),
    ("spectral sigil", "spectral sigil"),
    # Nightmare
    ("nightmare staff", "nightmare staff"),
    ("inquisitors", "inquisitor's mace"),
    ("inq mace", "inquisitor's mace"),
    ("inq helm", "inquisitor's great helm"),
    ("inq top", "inquisitor's hauberk"),
    ("inq legs", "inquisitor's plateskirt"),
    ("inquisitor helm", "inquisitor's great helm"),
    ("inquisitor top", "inquisitor's hauberk"),
    ("inquisitor legs", "inquisitor's plateskirt"),
    ("inquisitor mace", "inquisitor's mace"),
    ("orb", "nightmare orb"),
    # More abbreviations
    ("bones to peaches", "bones to peaches"),
    ("b2p", "bones to peaches"),
    ("bonecrusher", "bonecrusher"),
    ("herbsack", "herb sack"),
    ("herb sack", "herb sack"),
    ("gem bag", "gem bag"),
    ("coal bag", "coal bag"),
    ("seed box", "seed box"),
    ("rune pouch", "rune pouch"),
    ("looting bag", "looting bag"),
    ("loot bag", "looting bag"),
    # Bonds
    ("bond", "old school bond"),
    ("bonds", "old school bond"),
    # Amulets
    ("rancour", "amulet of rancour"),
]


def build_alias_table(entries: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """
    Build a surface -> canonical map from ordered (surface, target) pairs.

    Later pairs overwrite earlier ones for the same surface form.

    Args:
        entries: Ordered (surface_form, canonical_name) pairs

    Returns:
        Dict mapping lowercase surface form to lowercase canonical name
    """
    table: Dict[str, str] = {}
    for surface, target in entries:
        table[surface.strip().lower()] = target.strip().lower()
    return table


ITEM_ALIASES: Dict[str, str] = build_alias_table(_ALIAS_ENTRIES)

# Single-word item names that must lose to an alias or multi-word match
# ("scythe" should become "scythe of vitur", not the decorative Scythe)
ALIAS_PRIORITY_ITEMS = frozenset({
    'scythe',
})
