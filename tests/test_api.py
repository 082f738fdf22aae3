import tempfile
from unittest import TestCase

from alttp_rom.api.application import app
from alttp_rom.rom import BUILD, HASH


class ApiTests(TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        app.config['TESTING'] = True
        app.config['BUILD_ROOT'] = self.directory.name
        app.config['ROM_PATH'] = None
        self.client = app.test_client()

    def tearDown(self):
        self.directory.cleanup()

    def test_SaveThenGetBuild(self):
        response = self.client.post("/v1/build", json={'build': 'b1', 'hash': 'h1', 'patch': [{"100": [1, 2]}]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'build': 'b1', 'hash': 'h1'})

        response = self.client.get("/v1/build/b1/h1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['patch'], [{"100": [1, 2]}])

    def test_SaveBuildDefaultsKey(self):
        self.client.post("/v1/build", json={'patch': []})
        response = self.client.get("/v1/build/%s/%s" % (BUILD, HASH))
        self.assertEqual(response.status_code, 200)

    def test_MissingBuild(self):
        response = self.client.get("/v1/build/nope/nothing")
        self.assertEqual(response.status_code, 404)

    def test_SaveBuildRejectsBadParts(self):
        response = self.client.post("/v1/build", json={'patch': [[1, 2]]})
        self.assertEqual(response.status_code, 400)

    def test_GeneratePatch(self):
        response = self.client.post("/v1/patch/generate", json={
            'settings': {'heartColor': 'yellow', 'gameType': 'bogus'},
            'equipment': ['Hookshot'],
            'vanilla': True,
        })
        self.assertEqual(response.status_code, 200)

        data = response.get_json()
        self.assertEqual((data['build'], data['hash']), (BUILD, HASH))
        self.assertEqual(len(data['warnings']), 1)
        self.assertIn({str(0x6FA1E): [0x28]}, data['patch'])
        self.assertEqual(data['patch'][0], {str(0x184000): [0x12, 0x01, 0x35, 0xFF, 0x0C, 0x01, 0x44, 0xFF,
                                                            0x2A, 0x01, 0x46, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF]})

    def test_GeneratePatchWithChecksum(self):
        response = self.client.post("/v1/patch/generate", json={'checksum': True})
        self.assertEqual(response.status_code, 200)
        self.assertIn(str(0x7FDC), response.get_json()['patch'][-1])

    def test_GeneratePatchValidatesSchema(self):
        response = self.client.post("/v1/patch/generate", json={'equipment': 'Hookshot'})
        self.assertEqual(response.status_code, 400)

    def test_GeneratePatchStartScreenHashTooLong(self):
        response = self.client.post("/v1/patch/generate", json={'settings': {'startScreenHash': [1, 2, 3, 4, 5, 6]}})
        self.assertEqual(response.status_code, 400)
