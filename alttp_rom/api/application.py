from flask import Flask, request, Response, make_response, jsonify
from flask_expects_json import expects_json

from ..build import BuildRegistry
from ..errors import RomError
from ..patcher import log_to_patch
from ..rom import BUILD, HASH, Rom

from .exceptions import InvalidRequestParameters
from .requests.generate_patch_request import GeneratePatchRequest, SaveBuildRequest
from .config import BUILD_ROOT, ROM_PATH, LOG_LEVEL

app = Flask(__name__)
app.config.from_mapping(BUILD_ROOT=BUILD_ROOT, ROM_PATH=ROM_PATH)
app.logger.setLevel(LOG_LEVEL)


def get_registry() -> BuildRegistry:
    return BuildRegistry(app.config['BUILD_ROOT'], app.logger)


@app.errorhandler(400)
def bad_request(errors):
    return make_response(jsonify({'errors': getattr(errors.description, 'message', str(errors.description))}), 400)


@app.route("/v1/build/<build>/<hash>", methods=["GET"])
def getBuild(build: str, hash: str) -> Response:
    record = get_registry().get_build(build, hash)
    if record is None:
        return make_response(jsonify({'errors': "No build %s for %s" % (build, hash)}), 404)

    return make_response(record.to_json(), 200, {'Content-Type': 'application/json'})


@app.route("/v1/build", methods=["POST"])
@expects_json(SaveBuildRequest.schema)
def saveBuild() -> Response:
    try:
        request_data = SaveBuildRequest(request.get_json())
        record = Rom.save_build(request_data.patch, request_data.build, request_data.hash, registry=get_registry())

        return make_response(jsonify({'build': record.build, 'hash': record.hash}), 200)
    except InvalidRequestParameters as e:
        return make_response(jsonify({'errors': e.message}), e.status_code)


@app.route("/v1/patch/generate", methods=["POST"])
@expects_json(GeneratePatchRequest.schema)
def generatePatch() -> Response:
    try:
        request_data = GeneratePatchRequest(request.get_json())

        source = app.config['ROM_PATH'] if request_data.checksum else None
        with Rom(source, app.logger) as rom:
            if request_data.vanilla:
                rom.write_vanilla()
            rom.apply_settings(request_data.settings)
            if request_data.checksum:
                rom.update_checksum()

            return make_response(jsonify({
                'build': BUILD,
                'hash': HASH,
                'patch': log_to_patch(rom.get_write_log()),
                'warnings': [str(w) for w in rom.warnings],
            }), 200)
    except InvalidRequestParameters as e:
        return make_response(jsonify({'errors': e.message}), e.status_code)
    except RomError as e:
        app.logger.error("Patch generation failed: %s", e)
        return make_response(jsonify({'errors': str(e)}), 422)


if __name__ == '__main__':
    app.run(debug=True)
