"""GitHub emoji shortcodes and their substitution in text runs.

Values are either a literal glyph or, for GitHub's custom emoji that have no
Unicode code point, an image path starting with "/".
"""

from types import MappingProxyType

_EMOJI_IMAGE_ROOT = "/static/emojis"

_CUSTOM_EMOJI = (
    "atom",
    "basecamp",
    "basecampy",
    "bowtie",
    "dependabot",
    "electron",
    "feelsgood",
    "finnadie",
    "fishsticks",
    "goberserk",
    "godmode",
    "hurtrealbad",
    "neckbeard",
    "octocat",
    "rage1",
    "rage2",
    "rage3",
    "rage4",
    "shipit",
    "suspect",
    "trollface",
)

_GLYPHS = {
    # Smileys
    ":smile:": "😄",
    ":smiley:": "😃",
    ":grinning:": "😀",
    ":grin:": "😁",
    ":laughing:": "😆",
    ":satisfied:": "😆",
    ":sweat_smile:": "😅",
    ":joy:": "😂",
    ":rofl:": "🤣",
    ":slightly_smiling_face:": "🙂",
    ":upside_down_face:": "🙃",
    ":wink:": "😉",
    ":blush:": "😊",
    ":innocent:": "😇",
    ":heart_eyes:": "😍",
    ":star_struck:": "🤩",
    ":kissing_heart:": "😘",
    ":yum:": "😋",
    ":stuck_out_tongue:": "😛",
    ":stuck_out_tongue_winking_eye:": "😜",
    ":thinking:": "🤔",
    ":neutral_face:": "😐",
    ":expressionless:": "😑",
    ":no_mouth:": "😶",
    ":smirk:": "😏",
    ":unamused:": "😒",
    ":roll_eyes:": "🙄",
    ":grimacing:": "😬",
    ":relieved:": "😌",
    ":pensive:": "😔",
    ":sleepy:": "😪",
    ":sleeping:": "😴",
    ":mask:": "😷",
    ":nerd_face:": "🤓",
    ":sunglasses:": "😎",
    ":confused:": "😕",
    ":worried:": "😟",
    ":frowning_face:": "☹️",
    ":open_mouth:": "😮",
    ":astonished:": "😲",
    ":flushed:": "😳",
    ":fearful:": "😨",
    ":cold_sweat:": "😰",
    ":cry:": "😢",
    ":sob:": "😭",
    ":scream:": "😱",
    ":confounded:": "😖",
    ":weary:": "😩",
    ":triumph:": "😤",
    ":rage:": "😡",
    ":angry:": "😠",
    ":skull:": "💀",
    ":poop:": "💩",
    ":hankey:": "💩",
    ":clown_face:": "🤡",
    ":ghost:": "👻",
    ":alien:": "👽",
    ":robot:": "🤖",
    ":smiley_cat:": "😺",
    ":see_no_evil:": "🙈",
    ":hear_no_evil:": "🙉",
    ":speak_no_evil:": "🙊",
    # Hearts and symbols
    ":heart:": "❤️",
    ":orange_heart:": "🧡",
    ":yellow_heart:": "💛",
    ":green_heart:": "💚",
    ":blue_heart:": "💙",
    ":purple_heart:": "💜",
    ":black_heart:": "🖤",
    ":broken_heart:": "💔",
    ":sparkling_heart:": "💖",
    ":100:": "💯",
    ":anger:": "💢",
    ":boom:": "💥",
    ":collision:": "💥",
    ":dizzy:": "💫",
    ":sweat_drops:": "💦",
    ":zzz:": "💤",
    ":speech_balloon:": "💬",
    ":thought_balloon:": "💭",
    ":white_check_mark:": "✅",
    ":heavy_check_mark:": "✔️",
    ":ballot_box_with_check:": "☑️",
    ":x:": "❌",
    ":negative_squared_cross_mark:": "❎",
    ":heavy_plus_sign:": "➕",
    ":heavy_minus_sign:": "➖",
    ":question:": "❓",
    ":grey_question:": "❔",
    ":exclamation:": "❗",
    ":heavy_exclamation_mark:": "❗",
    ":grey_exclamation:": "❕",
    ":warning:": "⚠️",
    ":no_entry:": "⛔",
    ":no_entry_sign:": "🚫",
    ":stop_sign:": "🛑",
    ":information_source:": "ℹ️",
    ":recycle:": "♻️",
    ":copyright:": "©️",
    ":registered:": "®️",
    ":tm:": "™️",
    ":new:": "🆕",
    ":free:": "🆓",
    ":up:": "🆙",
    ":cool:": "🆒",
    ":ok:": "🆗",
    ":sos:": "🆘",
    ":red_circle:": "🔴",
    ":large_blue_circle:": "🔵",
    ":white_circle:": "⚪",
    ":black_circle:": "⚫",
    ":arrow_up:": "⬆️",
    ":arrow_down:": "⬇️",
    ":arrow_left:": "⬅️",
    ":arrow_right:": "➡️",
    ":arrows_counterclockwise:": "🔄",
    ":link:": "🔗",
    # People and gestures
    ":+1:": "👍",
    ":thumbsup:": "👍",
    ":-1:": "👎",
    ":thumbsdown:": "👎",
    ":ok_hand:": "👌",
    ":v:": "✌️",
    ":crossed_fingers:": "🤞",
    ":wave:": "👋",
    ":clap:": "👏",
    ":raised_hands:": "🙌",
    ":pray:": "🙏",
    ":muscle:": "💪",
    ":point_up:": "☝️",
    ":point_down:": "👇",
    ":point_left:": "👈",
    ":point_right:": "👉",
    ":raised_hand:": "✋",
    ":fist:": "✊",
    ":facepunch:": "👊",
    ":punch:": "👊",
    ":writing_hand:": "✍️",
    ":eyes:": "👀",
    ":brain:": "🧠",
    ":bust_in_silhouette:": "👤",
    ":busts_in_silhouette:": "👥",
    ":technologist:": "🧑‍💻",
    ":man_shrugging:": "🤷‍♂️",
    ":woman_shrugging:": "🤷‍♀️",
    ":shrug:": "🤷",
    ":facepalm:": "🤦",
    # Nature and weather
    ":sunny:": "☀️",
    ":cloud:": "☁️",
    ":umbrella:": "☔",
    ":snowflake:": "❄️",
    ":zap:": "⚡",
    ":fire:": "🔥",
    ":droplet:": "💧",
    ":ocean:": "🌊",
    ":rainbow:": "🌈",
    ":star:": "⭐",
    ":star2:": "🌟",
    ":sparkles:": "✨",
    ":crescent_moon:": "🌙",
    ":earth_americas:": "🌎",
    ":earth_africa:": "🌍",
    ":globe_with_meridians:": "🌐",
    ":seedling:": "🌱",
    ":evergreen_tree:": "🌲",
    ":deciduous_tree:": "🌳",
    ":cactus:": "🌵",
    ":herb:": "🌿",
    ":four_leaf_clover:": "🍀",
    ":fallen_leaf:": "🍂",
    ":rose:": "🌹",
    ":sunflower:": "🌻",
    ":cherry_blossom:": "🌸",
    ":bug:": "🐛",
    ":ant:": "🐜",
    ":bee:": "🐝",
    ":honeybee:": "🐝",
    ":snail:": "🐌",
    ":turtle:": "🐢",
    ":snake:": "🐍",
    ":whale:": "🐳",
    ":dolphin:": "🐬",
    ":octopus:": "🐙",
    ":crab:": "🦀",
    ":penguin:": "🐧",
    ":bird:": "🐦",
    ":owl:": "🦉",
    ":cat:": "🐱",
    ":dog:": "🐶",
    ":fox_face:": "🦊",
    ":panda_face:": "🐼",
    ":monkey:": "🐒",
    ":elephant:": "🐘",
    ":unicorn:": "🦄",
    ":dragon:": "🐉",
    ":t-rex:": "🦖",
    ":sauropod:": "🦕",
    # Food
    ":apple:": "🍎",
    ":green_apple:": "🍏",
    ":lemon:": "🍋",
    ":banana:": "🍌",
    ":watermelon:": "🍉",
    ":strawberry:": "🍓",
    ":cherries:": "🍒",
    ":peach:": "🍑",
    ":avocado:": "🥑",
    ":hot_pepper:": "🌶️",
    ":pizza:": "🍕",
    ":hamburger:": "🍔",
    ":fries:": "🍟",
    ":taco:": "🌮",
    ":cookie:": "🍪",
    ":cake:": "🍰",
    ":birthday:": "🎂",
    ":doughnut:": "🍩",
    ":coffee:": "☕",
    ":tea:": "🍵",
    ":beer:": "🍺",
    ":beers:": "🍻",
    ":wine_glass:": "🍷",
    ":popcorn:": "🍿",
    # Activities and objects
    ":tada:": "🎉",
    ":confetti_ball:": "🎊",
    ":balloon:": "🎈",
    ":gift:": "🎁",
    ":trophy:": "🏆",
    ":medal_sports:": "🏅",
    ":1st_place_medal:": "🥇",
    ":2nd_place_medal:": "🥈",
    ":3rd_place_medal:": "🥉",
    ":dart:": "🎯",
    ":game_die:": "🎲",
    ":video_game:": "🎮",
    ":art:": "🎨",
    ":musical_note:": "🎵",
    ":notes:": "🎶",
    ":headphones:": "🎧",
    ":microphone:": "🎤",
    ":movie_camera:": "🎥",
    ":camera:": "📷",
    ":tv:": "📺",
    ":computer:": "💻",
    ":desktop_computer:": "🖥️",
    ":keyboard:": "⌨️",
    ":iphone:": "📱",
    ":phone:": "☎️",
    ":telephone:": "☎️",
    ":battery:": "🔋",
    ":electric_plug:": "🔌",
    ":bulb:": "💡",
    ":flashlight:": "🔦",
    ":candle:": "🕯️",
    ":moneybag:": "💰",
    ":dollar:": "💵",
    ":credit_card:": "💳",
    ":gem:": "💎",
    ":wrench:": "🔧",
    ":hammer:": "🔨",
    ":hammer_and_wrench:": "🛠️",
    ":nut_and_bolt:": "🔩",
    ":gear:": "⚙️",
    ":chains:": "⛓️",
    ":toolbox:": "🧰",
    ":magnet:": "🧲",
    ":test_tube:": "🧪",
    ":microscope:": "🔬",
    ":telescope:": "🔭",
    ":satellite:": "📡",
    ":syringe:": "💉",
    ":pill:": "💊",
    ":door:": "🚪",
    ":key:": "🔑",
    ":old_key:": "🗝️",
    ":lock:": "🔒",
    ":unlock:": "🔓",
    ":closed_lock_with_key:": "🔐",
    ":shield:": "🛡️",
    ":bell:": "🔔",
    ":no_bell:": "🔕",
    ":loudspeaker:": "📢",
    ":mega:": "📣",
    ":mag:": "🔍",
    ":mag_right:": "🔎",
    ":hourglass:": "⌛",
    ":hourglass_flowing_sand:": "⏳",
    ":watch:": "⌚",
    ":alarm_clock:": "⏰",
    ":stopwatch:": "⏱️",
    ":calendar:": "📆",
    ":date:": "📅",
    ":memo:": "📝",
    ":pencil:": "📝",
    ":pencil2:": "✏️",
    ":black_nib:": "✒️",
    ":book:": "📖",
    ":books:": "📚",
    ":notebook:": "📓",
    ":bookmark:": "🔖",
    ":bookmark_tabs:": "📑",
    ":label:": "🏷️",
    ":page_facing_up:": "📄",
    ":page_with_curl:": "📃",
    ":scroll:": "📜",
    ":newspaper:": "📰",
    ":clipboard:": "📋",
    ":pushpin:": "📌",
    ":round_pushpin:": "📍",
    ":paperclip:": "📎",
    ":straight_ruler:": "📏",
    ":triangular_ruler:": "📐",
    ":scissors:": "✂️",
    ":file_folder:": "📁",
    ":open_file_folder:": "📂",
    ":card_index_dividers:": "🗂️",
    ":wastebasket:": "🗑️",
    ":package:": "📦",
    ":inbox_tray:": "📥",
    ":outbox_tray:": "📤",
    ":email:": "📧",
    ":envelope:": "✉️",
    ":incoming_envelope:": "📨",
    ":mailbox:": "📫",
    ":chart_with_upwards_trend:": "📈",
    ":chart_with_downwards_trend:": "📉",
    ":bar_chart:": "📊",
    ":abacus:": "🧮",
    ":construction:": "🚧",
    ":rotating_light:": "🚨",
    ":checkered_flag:": "🏁",
    ":triangular_flag_on_post:": "🚩",
    ":white_flag:": "🏳️",
    ":rainbow_flag:": "🏳️‍🌈",
    ":crown:": "👑",
    ":tophat:": "🎩",
    ":mortar_board:": "🎓",
    ":eyeglasses:": "👓",
    ":lipstick:": "💄",
    ":ring:": "💍",
    ":necktie:": "👔",
    ":shirt:": "👕",
    ":jeans:": "👖",
    ":briefcase:": "💼",
    ":handbag:": "👜",
    ":school_satchel:": "🎒",
    # Travel and places
    ":rocket:": "🚀",
    ":airplane:": "✈️",
    ":helicopter:": "🚁",
    ":car:": "🚗",
    ":red_car:": "🚗",
    ":taxi:": "🚕",
    ":bus:": "🚌",
    ":truck:": "🚚",
    ":ambulance:": "🚑",
    ":fire_engine:": "🚒",
    ":police_car:": "🚓",
    ":bike:": "🚲",
    ":train:": "🚋",
    ":ship:": "🚢",
    ":boat:": "⛵",
    ":sailboat:": "⛵",
    ":anchor:": "⚓",
    ":fuelpump:": "⛽",
    ":traffic_light:": "🚥",
    ":vertical_traffic_light:": "🚦",
    ":house:": "🏠",
    ":house_with_garden:": "🏡",
    ":office:": "🏢",
    ":hospital:": "🏥",
    ":bank:": "🏦",
    ":school:": "🏫",
    ":factory:": "🏭",
    ":european_castle:": "🏰",
    ":tent:": "⛺",
    ":mountain:": "⛰️",
    ":volcano:": "🌋",
    ":world_map:": "🗺️",
    ":compass:": "🧭",
    ":bricks:": "🧱",
    ":building_construction:": "🏗️",
    # Gitmoji
    ":construction_worker:": "👷",
    ":rewind:": "⏪",
    ":twisted_rightwards_arrows:": "🔀",
    ":card_file_box:": "🗃️",
    ":loud_sound:": "🔊",
    ":mute:": "🔇",
    ":bento:": "🍱",
    ":wheelchair:": "♿",
    ":alembic:": "⚗️",
    ":goal_net:": "🥅",
    ":adhesive_bandage:": "🩹",
    ":monocle_face:": "🧐",
    ":coffin:": "⚰️",
    ":thread:": "🧵",
    ":safety_vest:": "🦺",
}

EMOJI: MappingProxyType[str, str] = MappingProxyType(
    {**_GLYPHS, **{f":{name}:": f"{_EMOJI_IMAGE_ROOT}/{name}.png" for name in _CUSTOM_EMOJI}}
)


def emoji_html(shortcode: str) -> str | None:
    """Return the markup for `shortcode` (colons included), or None if unknown."""
    value = EMOJI.get(shortcode)
    if value is None:
        return None
    if value.startswith("/"):
        return (
            f'<img class="emoji" title="{shortcode}" alt="{shortcode}" src="{value}"'
            ' height="20" width="20" align="absmiddle">'
        )
    return value


def replace_emoji(text: str) -> str:
    """Replace every known `:shortcode:` in `text`; unknown ones are left verbatim.

    Single pass: a colon that does not open a known shortcode is emitted as-is
    and scanning resumes at the next colon, so `10::smile:` still finds
    `:smile:`.
    """
    if ":" not in text:
        return text

    parts: list[str] = []
    pos = 0
    start = text.find(":")
    while start != -1:
        end = text.find(":", start + 1)
        if end == -1:
            break
        token = text[start + 1 : end]
        html = emoji_html(text[start : end + 1]) if token and not any(c.isspace() for c in token) else None
        if html is None:
            start = end
            continue
        parts.append(text[pos:start])
        parts.append(html)
        pos = end + 1
        start = text.find(":", pos)

    parts.append(text[pos:])
    return "".join(parts)
