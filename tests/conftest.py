"""Shared fixtures: sample WSDL documents and legacy source snippets."""

import pytest

from reanimator.analysis.models import LegacyPattern
from reanimator.analysis.rules import get_rule_by_id

USER_SERVICE_WSDL = """<?xml version="1.0" encoding="UTF-8"?>
<wsdl:definitions name="UserService"
    targetNamespace="http://example.com/users"
    xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
    xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"
    xmlns:tns="http://example.com/users"
    xmlns:xsd="http://www.w3.org/2001/XMLSchema">

  <wsdl:types>
    <xsd:schema targetNamespace="http://example.com/users">
      <xsd:complexType name="User">
        <xsd:annotation>
          <xsd:documentation>A registered account</xsd:documentation>
        </xsd:annotation>
        <xsd:sequence>
          <xsd:element name="id" type="xsd:string"/>
          <xsd:element name="username" type="xsd:string"/>
          <xsd:element name="age" type="xsd:int" minOccurs="0"/>
          <xsd:element name="roles" type="xsd:string" maxOccurs="unbounded"/>
        </xsd:sequence>
      </xsd:complexType>
    </xsd:schema>
  </wsdl:types>

  <wsdl:message name="GetUserRequest">
    <wsdl:part name="userId" type="xsd:string"/>
  </wsdl:message>
  <wsdl:message name="GetUserResponse">
    <wsdl:part name="user" type="tns:User"/>
  </wsdl:message>
  <wsdl:message name="CreateUserRequest">
    <wsdl:part name="username" type="xsd:string"/>
    <wsdl:part name="email" type="xsd:string"/>
  </wsdl:message>
  <wsdl:message name="CreateUserResponse">
    <wsdl:part name="user" type="tns:User"/>
  </wsdl:message>

  <wsdl:portType name="UserPortType">
    <wsdl:operation name="GetUser">
      <wsdl:documentation>Fetch a single account</wsdl:documentation>
      <wsdl:input message="tns:GetUserRequest"/>
      <wsdl:output message="tns:GetUserResponse"/>
    </wsdl:operation>
    <wsdl:operation name="CreateUser">
      <wsdl:input message="tns:CreateUserRequest"/>
      <wsdl:output message="tns:CreateUserResponse"/>
    </wsdl:operation>
  </wsdl:portType>

  <wsdl:binding name="UserBinding" type="tns:UserPortType">
    <soap:binding style="document" transport="http://schemas.xmlsoap.org/soap/http"/>
    <wsdl:operation name="GetUser">
      <soap:operation soapAction="http://example.com/users/GetUser"/>
    </wsdl:operation>
    <wsdl:operation name="CreateUser">
      <soap:operation soapAction="http://example.com/users/CreateUser"/>
    </wsdl:operation>
  </wsdl:binding>

  <wsdl:service name="UserService">
    <wsdl:port name="UserPort" binding="tns:UserBinding">
      <soap:address location="http://example.com/soap/users"/>
    </wsdl:port>
  </wsdl:service>
</wsdl:definitions>
"""

FAULT_WSDL = """<?xml version="1.0" encoding="UTF-8"?>
<definitions name="AccountService"
    xmlns="http://schemas.xmlsoap.org/wsdl/"
    xmlns:tns="http://example.com/accounts"
    xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <message name="CloseAccountRequest">
    <part name="accountId" type="xsd:string"/>
  </message>
  <message name="CloseAccountResponse">
    <part name="closed" type="xsd:boolean"/>
  </message>
  <message name="AccountFault">
    <part name="reason" type="xsd:string"/>
  </message>
  <portType name="AccountPortType">
    <operation name="CloseAccount">
      <input message="tns:CloseAccountRequest"/>
      <output message="tns:CloseAccountResponse"/>
      <fault name="fault" message="tns:AccountFault"/>
    </operation>
    <operation name="GetOldStatement">
      <input message="tns:MissingRequest"/>
      <output message="tns:MissingResponse"/>
    </operation>
  </portType>
</definitions>
"""

EMPTY_WSDL = """<?xml version="1.0"?>
<definitions xmlns="http://schemas.xmlsoap.org/wsdl/" name="Nothing">
  <types/>
</definitions>
"""

MALFORMED_WSDL = "<definitions><portType name='Broken'><operation></definitions>"

LEGACY_JS = """var total = 0;
$(document).ready(function() {
  document.getElementById('out').innerHTML = '<b>' + total + '</b>';
});
"""


@pytest.fixture
def user_service_wsdl():
    """Document/literal style service with a complex type and a binding."""
    return USER_SERVICE_WSDL


@pytest.fixture
def fault_wsdl():
    """Unprefixed WSDL with a fault and an operation referencing missing messages."""
    return FAULT_WSDL


@pytest.fixture
def empty_wsdl():
    """Well-formed WSDL without any port types."""
    return EMPTY_WSDL


@pytest.fixture
def malformed_wsdl():
    """Text that is not well-formed XML."""
    return MALFORMED_WSDL


@pytest.fixture
def legacy_js():
    """A small jQuery era script."""
    return LEGACY_JS


@pytest.fixture
def make_pattern():
    """Factory building a detected pattern straight from a catalog rule."""

    def _make(rule_id: str, occurrences: int = 1) -> LegacyPattern:
        rule = get_rule_by_id(rule_id)
        return LegacyPattern(
            id=rule.rule_id,
            name=rule.name,
            severity=rule.severity,
            category=rule.category,
            occurrences=occurrences,
            modernization_path=rule.modernization_path,
            description=rule.description,
            rationale=rule.rationale,
            recommendation=rule.recommendation,
            suggested_target=rule.suggested_target,
        )

    return _make
