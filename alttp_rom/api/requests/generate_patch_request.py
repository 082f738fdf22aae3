import json

from ...models.rom_settings import RomSettings
from ..exceptions import InvalidRequestParameters


class GeneratePatchRequest(object):
    schema = {
        'type': 'object',
        'properties': {
            'settings': {'type': 'object'},
            'equipment': {'type': 'array', 'items': {'type': 'string'}},
            'vanilla': {'type': 'boolean'},
            'checksum': {'type': 'boolean'},
            'hardMode': {'type': 'integer'},
        },
        'required': []
    }

    def __init__(self, payload):
        self._validateSettings(payload)
        self._validateEquipment(payload)
        self._validateSwitches(payload)

#region Validation Methods
    def _validateSettings(self, payload):
        settings = payload.get("settings") or {}

        self.settings = RomSettings.from_dict(settings)
        if payload.get("hardMode") is not None:
            self.settings.hard_mode = payload["hardMode"]

        if self.settings.start_screen_hash and len(self.settings.start_screen_hash) > 5:
            raise InvalidRequestParameters("Start screen hash takes at most 5 bytes")

    def _validateEquipment(self, payload):
        equipment = payload.get("equipment")

        if equipment is not None:
            self.settings.starting_equipment = list(equipment)

    def _validateSwitches(self, payload):
        def getSwitch(switch):
            if switch is None:
                return False
            return switch

        self.vanilla = getSwitch(payload.get("vanilla"))
        self.checksum = getSwitch(payload.get("checksum"))

#endregion

    def to_json(self):
        return json.dumps({'settings': self.settings.__dict__, 'vanilla': self.vanilla, 'checksum': self.checksum},
                          default=lambda value: getattr(value, 'value', str(value)))


class SaveBuildRequest(object):
    schema = {
        'type': 'object',
        'properties': {
            'build': {'type': 'string'},
            'hash': {'type': 'string'},
            'patch': {'type': 'array'},
        },
        'required': ['patch']
    }

    def __init__(self, payload):
        self.build = payload.get("build")
        self.hash = payload.get("hash")
        self.patch = payload.get("patch")

        for part in self.patch:
            if not isinstance(part, dict):
                raise InvalidRequestParameters("Patch parts must be objects of offset to bytes")
