"""Slack emoji short codes mapped to their unicode glyphs.

Covers the codes Slack offers in its default picker for people, gestures,
hearts, nature, food, objects and symbols. Aliases Slack accepts (`+1` and
`thumbsup`, `smile` and `smiley`...) each get their own entry.
"""

from __future__ import annotations

from typing import Dict, Optional


EMOJI: Dict[str, str] = {
    # Faces
    "grinning": "\U0001F600",
    "smiley": "\U0001F603",
    "smile": "\U0001F604",
    "grin": "\U0001F601",
    "laughing": "\U0001F606",
    "satisfied": "\U0001F606",
    "sweat_smile": "\U0001F605",
    "rolling_on_the_floor_laughing": "\U0001F923",
    "joy": "\U0001F602",
    "slightly_smiling_face": "\U0001F642",
    "upside_down_face": "\U0001F643",
    "wink": "\U0001F609",
    "blush": "\U0001F60A",
    "innocent": "\U0001F607",
    "smiling_face_with_3_hearts": "\U0001F970",
    "heart_eyes": "\U0001F60D",
    "star-struck": "\U0001F929",
    "kissing_heart": "\U0001F618",
    "kissing": "\U0001F617",
    "relaxed": "\u263A\uFE0F",
    "yum": "\U0001F60B",
    "stuck_out_tongue": "\U0001F61B",
    "stuck_out_tongue_winking_eye": "\U0001F61C",
    "stuck_out_tongue_closed_eyes": "\U0001F61D",
    "money_mouth_face": "\U0001F911",
    "hugging_face": "\U0001F917",
    "thinking_face": "\U0001F914",
    "zipper_mouth_face": "\U0001F910",
    "neutral_face": "\U0001F610",
    "expressionless": "\U0001F611",
    "no_mouth": "\U0001F636",
    "smirk": "\U0001F60F",
    "unamused": "\U0001F612",
    "face_with_rolling_eyes": "\U0001F644",
    "grimacing": "\U0001F62C",
    "lying_face": "\U0001F925",
    "relieved": "\U0001F60C",
    "pensive": "\U0001F614",
    "sleepy": "\U0001F62A",
    "sleeping": "\U0001F634",
    "mask": "\U0001F637",
    "face_with_thermometer": "\U0001F912",
    "nauseated_face": "\U0001F922",
    "sneezing_face": "\U0001F927",
    "dizzy_face": "\U0001F635",
    "exploding_head": "\U0001F92F",
    "sunglasses": "\U0001F60E",
    "nerd_face": "\U0001F913",
    "confused": "\U0001F615",
    "worried": "\U0001F61F",
    "slightly_frowning_face": "\U0001F641",
    "white_frowning_face": "\u2639\uFE0F",
    "open_mouth": "\U0001F62E",
    "hushed": "\U0001F62F",
    "astonished": "\U0001F632",
    "flushed": "\U0001F633",
    "pleading_face": "\U0001F97A",
    "frowning": "\U0001F626",
    "anguished": "\U0001F627",
    "fearful": "\U0001F628",
    "cold_sweat": "\U0001F630",
    "disappointed_relieved": "\U0001F625",
    "cry": "\U0001F622",
    "sob": "\U0001F62D",
    "scream": "\U0001F631",
    "confounded": "\U0001F616",
    "persevere": "\U0001F623",
    "disappointed": "\U0001F61E",
    "sweat": "\U0001F613",
    "weary": "\U0001F629",
    "tired_face": "\U0001F62B",
    "yawning_face": "\U0001F971",
    "triumph": "\U0001F624",
    "rage": "\U0001F621",
    "angry": "\U0001F620",
    "face_with_symbols_on_mouth": "\U0001F92C",
    "smiling_imp": "\U0001F608",
    "imp": "\U0001F47F",
    "skull": "\U0001F480",
    "hankey": "\U0001F4A9",
    "poop": "\U0001F4A9",
    "shit": "\U0001F4A9",
    "clown_face": "\U0001F921",
    "ghost": "\U0001F47B",
    "alien": "\U0001F47D",
    "robot_face": "\U0001F916",
    "smiley_cat": "\U0001F63A",
    "see_no_evil": "\U0001F648",
    "hear_no_evil": "\U0001F649",
    "speak_no_evil": "\U0001F64A",
    # Hearts and marks
    "kiss": "\U0001F48B",
    "heart": "\u2764\uFE0F",
    "orange_heart": "\U0001F9E1",
    "yellow_heart": "\U0001F49B",
    "green_heart": "\U0001F49A",
    "blue_heart": "\U0001F499",
    "purple_heart": "\U0001F49C",
    "black_heart": "\U0001F5A4",
    "broken_heart": "\U0001F494",
    "two_hearts": "\U0001F495",
    "sparkling_heart": "\U0001F496",
    "heartpulse": "\U0001F497",
    "heartbeat": "\U0001F493",
    "revolving_hearts": "\U0001F49E",
    "cupid": "\U0001F498",
    "100": "\U0001F4AF",
    "anger": "\U0001F4A2",
    "boom": "\U0001F4A5",
    "collision": "\U0001F4A5",
    "dizzy": "\U0001F4AB",
    "sweat_drops": "\U0001F4A6",
    "dash": "\U0001F4A8",
    "speech_balloon": "\U0001F4AC",
    "thought_balloon": "\U0001F4AD",
    "zzz": "\U0001F4A4",
    # Hands and people
    "wave": "\U0001F44B",
    "raised_back_of_hand": "\U0001F91A",
    "raised_hand": "\u270B",
    "hand": "\u270B",
    "spock-hand": "\U0001F596",
    "ok_hand": "\U0001F44C",
    "v": "\u270C\uFE0F",
    "crossed_fingers": "\U0001F91E",
    "the_horns": "\U0001F918",
    "call_me_hand": "\U0001F919",
    "point_left": "\U0001F448",
    "point_right": "\U0001F449",
    "point_up_2": "\U0001F446",
    "point_down": "\U0001F447",
    "point_up": "\u261D\uFE0F",
    "+1": "\U0001F44D",
    "thumbsup": "\U0001F44D",
    "-1": "\U0001F44E",
    "thumbsdown": "\U0001F44E",
    "fist": "\u270A",
    "facepunch": "\U0001F44A",
    "punch": "\U0001F44A",
    "clap": "\U0001F44F",
    "raised_hands": "\U0001F64C",
    "open_hands": "\U0001F450",
    "handshake": "\U0001F91D",
    "pray": "\U0001F64F",
    "writing_hand": "\u270D\uFE0F",
    "muscle": "\U0001F4AA",
    "eyes": "\U0001F440",
    "eye": "\U0001F441\uFE0F",
    "brain": "\U0001F9E0",
    "baby": "\U0001F476",
    "man": "\U0001F468",
    "woman": "\U0001F469",
    "bow": "\U0001F647",
    "facepalm": "\U0001F926",
    "shrug": "\U0001F937",
    "dancer": "\U0001F483",
    "runner": "\U0001F3C3",
    "running": "\U0001F3C3",
    # Nature
    "dog": "\U0001F436",
    "cat": "\U0001F431",
    "mouse": "\U0001F42D",
    "rabbit": "\U0001F430",
    "fox_face": "\U0001F98A",
    "bear": "\U0001F43B",
    "panda_face": "\U0001F43C",
    "koala": "\U0001F428",
    "tiger": "\U0001F42F",
    "lion_face": "\U0001F981",
    "cow": "\U0001F42E",
    "pig": "\U0001F437",
    "frog": "\U0001F438",
    "monkey_face": "\U0001F435",
    "chicken": "\U0001F414",
    "penguin": "\U0001F427",
    "bird": "\U0001F426",
    "hatching_chick": "\U0001F423",
    "unicorn_face": "\U0001F984",
    "bee": "\U0001F41D",
    "honeybee": "\U0001F41D",
    "bug": "\U0001F41B",
    "butterfly": "\U0001F98B",
    "snail": "\U0001F40C",
    "turtle": "\U0001F422",
    "snake": "\U0001F40D",
    "octopus": "\U0001F419",
    "fish": "\U0001F41F",
    "whale": "\U0001F433",
    "dolphin": "\U0001F42C",
    "shark": "\U0001F988",
    "crab": "\U0001F980",
    "bouquet": "\U0001F490",
    "cherry_blossom": "\U0001F338",
    "rose": "\U0001F339",
    "sunflower": "\U0001F33B",
    "tulip": "\U0001F337",
    "seedling": "\U0001F331",
    "evergreen_tree": "\U0001F332",
    "deciduous_tree": "\U0001F333",
    "palm_tree": "\U0001F334",
    "cactus": "\U0001F335",
    "four_leaf_clover": "\U0001F340",
    "maple_leaf": "\U0001F341",
    "fallen_leaf": "\U0001F342",
    "mushroom": "\U0001F344",
    "earth_africa": "\U0001F30D",
    "earth_americas": "\U0001F30E",
    "earth_asia": "\U0001F30F",
    "full_moon": "\U0001F315",
    "new_moon": "\U0001F311",
    "crescent_moon": "\U0001F319",
    "sunny": "\u2600\uFE0F",
    "star": "\u2B50",
    "star2": "\U0001F31F",
    "sparkles": "\u2728",
    "zap": "\u26A1",
    "fire": "\U0001F525",
    "rainbow": "\U0001F308",
    "cloud": "\u2601\uFE0F",
    "partly_sunny": "\u26C5",
    "umbrella": "\u2614",
    "snowflake": "\u2744\uFE0F",
    "snowman": "\u26C4",
    "droplet": "\U0001F4A7",
    "ocean": "\U0001F30A",
    # Food and drink
    "apple": "\U0001F34E",
    "green_apple": "\U0001F34F",
    "pear": "\U0001F350",
    "tangerine": "\U0001F34A",
    "lemon": "\U0001F34B",
    "banana": "\U0001F34C",
    "watermelon": "\U0001F349",
    "grapes": "\U0001F347",
    "strawberry": "\U0001F353",
    "cherries": "\U0001F352",
    "peach": "\U0001F351",
    "pineapple": "\U0001F34D",
    "avocado": "\U0001F951",
    "eggplant": "\U0001F346",
    "carrot": "\U0001F955",
    "corn": "\U0001F33D",
    "hot_pepper": "\U0001F336\uFE0F",
    "bread": "\U0001F35E",
    "cheese_wedge": "\U0001F9C0",
    "egg": "\U0001F95A",
    "bacon": "\U0001F953",
    "hamburger": "\U0001F354",
    "fries": "\U0001F35F",
    "pizza": "\U0001F355",
    "hotdog": "\U0001F32D",
    "taco": "\U0001F32E",
    "burrito": "\U0001F32F",
    "sushi": "\U0001F363",
    "ramen": "\U0001F35C",
    "spaghetti": "\U0001F35D",
    "icecream": "\U0001F366",
    "doughnut": "\U0001F369",
    "cookie": "\U0001F36A",
    "birthday": "\U0001F382",
    "cake": "\U0001F370",
    "chocolate_bar": "\U0001F36B",
    "candy": "\U0001F36C",
    "popcorn": "\U0001F37F",
    "coffee": "\u2615",
    "tea": "\U0001F375",
    "beer": "\U0001F37A",
    "beers": "\U0001F37B",
    "wine_glass": "\U0001F377",
    "cocktail": "\U0001F378",
    "tropical_drink": "\U0001F379",
    "champagne": "\U0001F37E",
    # Activities and objects
    "soccer": "\u26BD",
    "basketball": "\U0001F3C0",
    "football": "\U0001F3C8",
    "baseball": "\u26BE",
    "tennis": "\U0001F3BE",
    "trophy": "\U0001F3C6",
    "medal": "\U0001F3C5",
    "first_place_medal": "\U0001F947",
    "dart": "\U0001F3AF",
    "video_game": "\U0001F3AE",
    "game_die": "\U0001F3B2",
    "jigsaw": "\U0001F9E9",
    "art": "\U0001F3A8",
    "guitar": "\U0001F3B8",
    "musical_note": "\U0001F3B5",
    "notes": "\U0001F3B6",
    "microphone": "\U0001F3A4",
    "headphones": "\U0001F3A7",
    "tada": "\U0001F389",
    "confetti_ball": "\U0001F38A",
    "balloon": "\U0001F388",
    "gift": "\U0001F381",
    "christmas_tree": "\U0001F384",
    "jack_o_lantern": "\U0001F383",
    "car": "\U0001F697",
    "red_car": "\U0001F697",
    "taxi": "\U0001F695",
    "bus": "\U0001F68C",
    "bike": "\U0001F6B2",
    "airplane": "\u2708\uFE0F",
    "rocket": "\U0001F680",
    "ship": "\U0001F6A2",
    "house": "\U0001F3E0",
    "office": "\U0001F3E2",
    "watch": "\u231A",
    "iphone": "\U0001F4F1",
    "computer": "\U0001F4BB",
    "keyboard": "\u2328\uFE0F",
    "camera": "\U0001F4F7",
    "tv": "\U0001F4FA",
    "phone": "\u260E\uFE0F",
    "telephone": "\u260E\uFE0F",
    "hourglass": "\u231B",
    "alarm_clock": "\u23F0",
    "stopwatch": "\u23F1\uFE0F",
    "battery": "\U0001F50B",
    "bulb": "\U0001F4A1",
    "flashlight": "\U0001F526",
    "money_with_wings": "\U0001F4B8",
    "moneybag": "\U0001F4B0",
    "credit_card": "\U0001F4B3",
    "gem": "\U0001F48E",
    "wrench": "\U0001F527",
    "hammer": "\U0001F528",
    "hammer_and_wrench": "\U0001F6E0\uFE0F",
    "gear": "\u2699\uFE0F",
    "link": "\U0001F517",
    "lock": "\U0001F512",
    "unlock": "\U0001F513",
    "key": "\U0001F511",
    "mag": "\U0001F50D",
    "bell": "\U0001F514",
    "no_bell": "\U0001F515",
    "loudspeaker": "\U0001F4E2",
    "mega": "\U0001F4E3",
    "email": "\U0001F4E7",
    "envelope": "\u2709\uFE0F",
    "inbox_tray": "\U0001F4E5",
    "outbox_tray": "\U0001F4E4",
    "package": "\U0001F4E6",
    "memo": "\U0001F4DD",
    "pencil": "\U0001F4DD",
    "pencil2": "\u270F\uFE0F",
    "clipboard": "\U0001F4CB",
    "calendar": "\U0001F4C6",
    "date": "\U0001F4C5",
    "chart_with_upwards_trend": "\U0001F4C8",
    "chart_with_downwards_trend": "\U0001F4C9",
    "bar_chart": "\U0001F4CA",
    "pushpin": "\U0001F4CC",
    "paperclip": "\U0001F4CE",
    "scissors": "\u2702\uFE0F",
    "file_folder": "\U0001F4C1",
    "books": "\U0001F4DA",
    "book": "\U0001F4D6",
    "bookmark": "\U0001F516",
    "newspaper": "\U0001F4F0",
    "pill": "\U0001F48A",
    "syringe": "\U0001F489",
    "crystal_ball": "\U0001F52E",
    "shield": "\U0001F6E1\uFE0F",
    "bomb": "\U0001F4A3",
    "hourglass_flowing_sand": "\u23F3",
    "construction": "\U0001F6A7",
    "rotating_light": "\U0001F6A8",
    "checkered_flag": "\U0001F3C1",
    "triangular_flag_on_post": "\U0001F6A9",
    "crown": "\U0001F451",
    "tophat": "\U0001F3A9",
    "mortar_board": "\U0001F393",
    "eyeglasses": "\U0001F453",
    # Symbols
    "white_check_mark": "\u2705",
    "heavy_check_mark": "\u2714\uFE0F",
    "ballot_box_with_check": "\u2611\uFE0F",
    "x": "\u274C",
    "negative_squared_cross_mark": "\u274E",
    "heavy_plus_sign": "\u2795",
    "heavy_minus_sign": "\u2796",
    "heavy_multiplication_x": "\u2716\uFE0F",
    "heavy_division_sign": "\u2797",
    "question": "\u2753",
    "grey_question": "\u2754",
    "exclamation": "\u2757",
    "heavy_exclamation_mark": "\u2757",
    "grey_exclamation": "\u2755",
    "bangbang": "\u203C\uFE0F",
    "interrobang": "\u2049\uFE0F",
    "warning": "\u26A0\uFE0F",
    "no_entry": "\u26D4",
    "no_entry_sign": "\U0001F6AB",
    "stop_sign": "\U0001F6D1",
    "recycle": "\u267B\uFE0F",
    "information_source": "\u2139\uFE0F",
    "copyright": "\u00A9\uFE0F",
    "registered": "\u00AE\uFE0F",
    "tm": "\u2122\uFE0F",
    "arrow_up": "\u2B06\uFE0F",
    "arrow_down": "\u2B07\uFE0F",
    "arrow_left": "\u2B05\uFE0F",
    "arrow_right": "\u27A1\uFE0F",
    "arrows_counterclockwise": "\U0001F504",
    "repeat": "\U0001F501",
    "new": "\U0001F195",
    "free": "\U0001F193",
    "ok": "\U0001F197",
    "cool": "\U0001F192",
    "sos": "\U0001F198",
    "up": "\U0001F199",
    "red_circle": "\U0001F534",
    "large_blue_circle": "\U0001F535",
    "large_green_circle": "\U0001F7E2",
    "large_yellow_circle": "\U0001F7E1",
    "white_circle": "\u26AA",
    "black_circle": "\u26AB",
    "small_red_triangle": "\U0001F53A",
    "small_red_triangle_down": "\U0001F53B",
    "large_orange_diamond": "\U0001F536",
    "large_blue_diamond": "\U0001F537",
    "hash": "#\uFE0F\u20E3",
    "zero": "0\uFE0F\u20E3",
    "one": "1\uFE0F\u20E3",
    "two": "2\uFE0F\u20E3",
    "three": "3\uFE0F\u20E3",
    "four": "4\uFE0F\u20E3",
    "five": "5\uFE0F\u20E3",
    "six": "6\uFE0F\u20E3",
    "seven": "7\uFE0F\u20E3",
    "eight": "8\uFE0F\u20E3",
    "nine": "9\uFE0F\u20E3",
    "keycap_ten": "\U0001F51F",
    "on": "\U0001F51B",
    "soon": "\U0001F51C",
    "top": "\U0001F51D",
    "back": "\U0001F519",
    "end": "\U0001F51A",
}


def lookup(code: str) -> Optional[str]:
    """Glyph for a short code without its colons, or None if unknown."""
    return EMOJI.get(code)
