import json
import unittest

import httpx

from feast.domain.PersonPreference import PersonPreference
from feast.infra.Menu_Repository import MenuRepository
from feast.infra.Preference_Repository import PreferenceRepository
from feast.infra.Procurement_Repository import ProcurementRepository
from feast.infra.supabase_client import SupabaseClient, SupabaseError, eq, in_, is_null, not_null
from feast.tests.fakes import FakeSupabaseClient

URL = "https://feast.supabase.co"


class RecordingTransport:
    """Collects requests and answers them with a handler(request) -> httpx.Response."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> SupabaseClient:
        return SupabaseClient(URL, "service-key", transport=httpx.MockTransport(self))


class TestSupabaseClient(unittest.TestCase):

    def test_missing_config(self):
        with self.assertRaises(SupabaseError):
            SupabaseClient("", "")

    def test_filter_helpers(self):
        self.assertEqual(eq(True), "eq.true")
        self.assertEqual(eq("abc"), "eq.abc")
        self.assertEqual(in_(["a", "b"]), "in.(a,b)")
        self.assertEqual(not_null(), "not.is.null")
        self.assertEqual(is_null(), "is.null")

    def test_select_sends_filters_and_auth(self):
        transport = RecordingTransport(lambda r: httpx.Response(200, json=[{"id": "e1"}]))
        rows = transport.client().select("events", filters={"status": eq("active")}, order="created_at.desc")

        self.assertEqual(rows, [{"id": "e1"}])
        request = transport.requests[0]
        self.assertEqual(request.method, "GET")
        self.assertEqual(request.url.path, "/rest/v1/events")
        self.assertEqual(request.url.params["status"], "eq.active")
        self.assertEqual(request.url.params["order"], "created_at.desc")
        self.assertEqual(request.url.params["select"], "*")
        self.assertEqual(request.headers["apikey"], "service-key")
        self.assertEqual(request.headers["authorization"], "Bearer service-key")

    def test_select_one(self):
        transport = RecordingTransport(lambda r: httpx.Response(200, json=[]))
        self.assertIsNone(transport.client().select_one("events", filters={"id": eq("x")}))
        self.assertEqual(transport.requests[0].url.params["limit"], "1")

    def test_insert_returns_row(self):
        def handler(request):
            body = json.loads(request.content)
            return httpx.Response(201, json=[{"id": "n1", **body}])

        transport = RecordingTransport(handler)
        row = transport.client().insert("events", {"name": "BBQ"})
        self.assertEqual(row, {"id": "n1", "name": "BBQ"})
        self.assertEqual(transport.requests[0].headers["prefer"], "return=representation")

    def test_error_response_raises(self):
        transport = RecordingTransport(lambda r: httpx.Response(400, json={"message": "invalid input syntax"}))
        with self.assertRaises(SupabaseError) as ctx:
            transport.client().update("events", {"name": "x"}, filters={"id": eq("e1")})
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "invalid input syntax")

    def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(SupabaseError):
            RecordingTransport(handler).client().select("events")


class TestRepositoriesOverHttp(unittest.TestCase):

    def test_rebalance_updates_changed_percentages(self):
        items = [
            {"id": "b1", "course_id": "c1", "name": "Picanha", "item_type": "protein", "category": "beef",
             "distribution_percentage": "100", "sort_order": 0, "is_active": True},
            {"id": "b2", "course_id": "c1", "name": "Entrecote", "item_type": "protein", "category": "beef",
             "distribution_percentage": None, "sort_order": 1, "is_active": True},
            {"id": "b3", "course_id": "c1", "name": "Burger", "item_type": "protein", "category": "beef",
             "distribution_percentage": None, "sort_order": 2, "is_active": True},
        ]

        def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json=items)
            return httpx.Response(200, json=[])

        transport = RecordingTransport(handler)
        shares = MenuRepository(transport.client()).rebalance("c1", "beef")

        self.assertEqual(shares, {"b1": 33.34, "b2": 33.33, "b3": 33.33})
        get = transport.requests[0]
        self.assertEqual(get.url.params["course_id"], "eq.c1")
        self.assertEqual(get.url.params["is_active"], "eq.true")
        patches = {r.url.params["id"]: json.loads(r.content) for r in transport.requests if r.method == "PATCH"}
        self.assertEqual(patches, {
            "in.(b1)": {"distribution_percentage": 33.34},
            "in.(b2,b3)": {"distribution_percentage": 33.33},
        })

    def test_rebalance_skips_balanced_category(self):
        items = [{"id": "k1", "course_id": "c1", "name": "Kip", "item_type": "protein",
                  "category": "chicken", "distribution_percentage": 100, "is_active": True}]
        transport = RecordingTransport(lambda r: httpx.Response(200, json=items))
        MenuRepository(transport.client()).rebalance("c1", "chicken")
        self.assertEqual([r.method for r in transport.requests], ["GET"])

    def test_load_persons_names_partners(self):
        def handler(request):
            table = request.url.path.rsplit("/", 1)[-1]
            if table == "registrations":
                return httpx.Response(200, json=[{"user_id": "u1", "partner_first_name": "Sanne",
                                                  "partner_last_name": "de Vries"}])
            if request.url.params.get("person_type") == "eq.self":
                return httpx.Response(200, json=[
                    {"user_id": "u1", "person_type": "self", "users": {"name": "Pieter"},
                     "meat_distribution": {"beef": 100}},
                    {"user_id": "u2", "person_type": "self", "users": None},
                ])
            return httpx.Response(200, json=[{"user_id": "u1", "person_type": "partner"}])

        persons = PreferenceRepository(RecordingTransport(handler).client()).load_persons()
        self.assertEqual([p.name for p in persons], ["Onbekend", "Pieter", "Sanne de Vries"])
        self.assertTrue(persons[2].is_partner)
        self.assertIsNone(persons[2].meat_distribution)

    def test_completion_status_lists_missing_participants(self):
        db = FakeSupabaseClient({"users": [
            {"id": "u1", "name": "Anna", "role": "participant", "is_active": True},
            {"id": "u2", "name": "Bram", "role": "participant", "is_active": True},
            {"id": "u3", "name": "Beheerder", "role": "admin", "is_active": True},
            {"id": "u4", "name": "Oud lid", "role": "participant", "is_active": False},
            {"id": "u5", "name": None, "role": "participant", "is_active": True},
        ]})
        persons = [
            PersonPreference(name="Anna", person_type="self", user_id="u1"),
            PersonPreference(name="Partner van Bram", person_type="partner", user_id="u2"),
        ]

        status = PreferenceRepository(db).completion_status(persons)

        self.assertEqual(status, {
            "completed": 1,
            "totalParticipants": 3,
            "totalPersons": 2,
            "missingParticipants": ["Bram", "Onbekend"],
        })

    def test_procurement_lines_for_event(self):
        rows = [{"menu_item_id": "m1", "ordered_quantity": 2, "received_quantity": 2,
                 "purchase_orders": {"event_id": "e1", "supplier": "Makro"}}]
        transport = RecordingTransport(lambda r: httpx.Response(200, json=rows))
        lines = ProcurementRepository(transport.client()).lines_for_event("e1")

        self.assertEqual(lines[0].supplier, "Makro")
        params = transport.requests[0].url.params
        self.assertEqual(params["purchase_orders.event_id"], "eq.e1")
        self.assertEqual(params["menu_item_id"], "not.is.null")
        self.assertIn("purchase_orders!inner", params["select"])


if __name__ == "__main__":
    unittest.main()
