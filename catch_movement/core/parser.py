import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

PLAYFIELD_WIDTH = 512


class CatchHitObject: # single catch object in beatmap
    palpable = True

    def __init__(self, x, start_time, x_offset=0.0, new_combo=False):
        self.x = x
        self.x_offset = x_offset
        self.start_time = start_time
        self.new_combo = new_combo

        # populated by beatmap processing
        self.hyper_dash_target: Optional["CatchHitObject"] = None
        self.distance_to_hyper_dash = 0.0

    @property
    def effective_x(self):
        return min(max(self.x + self.x_offset, 0.0), float(PLAYFIELD_WIDTH))

    @property
    def hyper_dash(self):
        return self.hyper_dash_target is not None

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, start_time={self.start_time})"


class Fruit(CatchHitObject):
    pass


class JuiceStream(CatchHitObject):
    # only the head is kept; nested droplets are not reconstructed
    pass


class BananaShower(CatchHitObject):
    palpable = False

    def __init__(self, start_time, end_time):
        super().__init__(PLAYFIELD_WIDTH / 2, start_time)
        self.end_time = end_time


def _is_circle(type_bits):
    return (type_bits & 1) != 0

def _is_slider(type_bits):
    return (type_bits & 2) != 0

def _is_spinner(type_bits):
    return (type_bits & 8) != 0


class Parser:
    def __init__(self, filepath):
        self.filepath = filepath
        self.general: Dict[str, str] = {}
        self.metadata: Dict[str, str] = {}
        self.difficulty: Dict[str, float] = {}
        self.hit_objects: List[CatchHitObject] = []

    @property
    def mode(self) -> int:
        return int(self.general.get("Mode", 0))

    @property
    def circle_size(self) -> float:
        return self.difficulty.get("CircleSize", 5.0)

    @property
    def palpable_objects(self) -> List[CatchHitObject]:
        return [h for h in self.hit_objects if h.palpable]

    def parse(self):
        with open(self.filepath, "r", encoding="utf-8") as f:
            return self.parse_lines(f)

    def parse_lines(self, lines):
        current_section = None

        for line in lines:
            line = line.strip()

            if not line or line.startswith("//"):
                continue

            if line.startswith("[") and line.endswith("]"): # start of new section
                current_section = line[1:-1]
                continue

            if current_section == "General":
                self._parse_general(line)
            elif current_section == "Metadata":
                self._parse_metadata(line)
            elif current_section == "Difficulty":
                self._parse_difficulty(line)
            elif current_section == "HitObjects":
                self._parse_hit_object(line)

        logger.debug("parsed %d hit objects from %s", len(self.hit_objects), self.filepath)
        return self

    def _parse_general(self, line):
        if ':' in line:
            key, value = line.split(":", 1)
            self.general[key.strip()] = value.strip()

    def _parse_metadata(self, line): # parse metadata
        if ':' in line:
            key, value = line.split(":", 1)
            self.metadata[key] = value

    def _parse_difficulty(self, line): # parse difficulty
        if ':' in line:
            key, value = line.split(":", 1)
            try:
                self.difficulty[key.strip()] = float(value)
            except ValueError:
                raise ValueError(f"Invalid difficulty value: {line!r}")

    def _parse_hit_object(self, line): # parse objects in map
        # x,y,time,type,hitSound,...  (y is irrelevant to catch)
        if ',' not in line:
            return

        arr = line.split(",")
        if len(arr) < 5:
            logger.warning("skipping short hit object line: %r", line)
            return

        try:
            x = float(arr[0])
            start_time = float(arr[2])
            type_bits = int(arr[3])
            end_time = start_time
            if _is_spinner(type_bits) and len(arr) > 5 and arr[5]:
                end_time = float(arr[5])
        except ValueError:
            raise ValueError(f"Invalid hit object: {line!r}")

        new_combo = (type_bits & 4) != 0

        if _is_circle(type_bits):
            self.hit_objects.append(Fruit(x, start_time, new_combo=new_combo))
        elif _is_slider(type_bits):
            self.hit_objects.append(JuiceStream(x, start_time, new_combo=new_combo))
        elif _is_spinner(type_bits):
            self.hit_objects.append(BananaShower(start_time, end_time))
        else:
            logger.warning("skipping hit object with unknown type %d", type_bits)
